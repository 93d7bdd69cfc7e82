from __future__ import annotations

from google_contacts.api import logging
from google_contacts.cli.commands import cli


def main() -> None:
    logging.configure()
    cli(_anyio_backend="asyncio")


if __name__ == "__main__":
    main()
