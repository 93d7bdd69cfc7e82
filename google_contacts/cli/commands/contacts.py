from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import asyncclick as click
import structlog

from google_contacts.api import ContactsClient
from google_contacts.api import credentials as token_store
from google_contacts.cli.commands import constants
from google_contacts.cli.commands.common import cli, unwrap

if TYPE_CHECKING:
    from collections.abc import Generator
    from os import PathLike

logger = structlog.get_logger(__name__)


@contextmanager
def contacts_client(token: PathLike) -> Generator[ContactsClient, None, None]:
    with ContactsClient(token_store.load_credentials(token)) as client:
        yield client


async def _refresh(client: ContactsClient, token: PathLike) -> None:
    access_token = unwrap(await client.refresh_access_token(apply=True))
    token_store.save_access_token(token, access_token)


@cli.command("list-contacts")
@click.option(
    "-t",
    "--token",
    type=click.Path(exists=True, dir_okay=False),
    default=constants.TOKEN_FILE,
    help="The path to the token file",
)
@click.option(
    "--refresh/--no-refresh",
    type=bool,
    is_flag=True,
    default=False,
    help="Flag indicating whether to refresh the access token before fetching",
)
async def list_contacts(token: PathLike, refresh: bool) -> None:
    with contacts_client(token) as client:
        if refresh:
            await _refresh(client, token)

        contact_lst = unwrap(await client.get_contacts())

    for contact in contact_lst:
        logger.info("contact", contact=contact._asdict())
    logger.info("Listed contacts", length=len(contact_lst))


@cli.command("get-photo")
@click.argument("path", type=str)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    required=True,
    help="Where to write the photo",
)
@click.option(
    "-t",
    "--token",
    type=click.Path(exists=True, dir_okay=False),
    default=constants.TOKEN_FILE,
    help="The path to the token file",
)
@click.option(
    "--refresh/--no-refresh",
    type=bool,
    is_flag=True,
    default=False,
    help="Flag indicating whether to refresh the access token before fetching",
)
async def get_photo(path: str, output: PathLike, token: PathLike, refresh: bool) -> None:
    with contacts_client(token) as client:
        if refresh:
            await _refresh(client, token)

        data = unwrap(await client.get_photo(path))

    Path(output).write_bytes(data)
    logger.info("Saved photo", file=str(output), length=len(data))
