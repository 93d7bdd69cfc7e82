from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import asyncclick as click

if TYPE_CHECKING:
    from google_contacts.api import Result

T = TypeVar("T")


@click.group()
async def cli() -> None:
    pass


def unwrap(result: Result[T]) -> T:
    """Returns the value of the result or aborts the command with its error."""
    if result.error is not None:
        raise click.ClickException(str(result.error))
    return result.unwrap()
