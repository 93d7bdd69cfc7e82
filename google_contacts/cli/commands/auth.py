from __future__ import annotations

from typing import TYPE_CHECKING

import asyncclick as click
import structlog

from google_contacts.api import ContactsClient
from google_contacts.api import credentials as token_store
from google_contacts.cli.commands import constants
from google_contacts.cli.commands.common import cli, unwrap

if TYPE_CHECKING:
    from os import PathLike

logger = structlog.get_logger(__name__)


@cli.command("authorize")
@click.option(
    "-c",
    "--credentials",
    type=click.Path(exists=True, dir_okay=False),
    default=constants.CREDENTIALS_FILE,
    help="The path to the OAuth client secrets file",
)
@click.option(
    "-t",
    "--token",
    type=click.Path(exists=False, dir_okay=False),
    default=constants.TOKEN_FILE,
    help="The path to the token file",
)
@click.option("-p", "--port", type=int, default=0, help="The local redirect port (0 picks a free one).")
async def authorize(credentials: PathLike, token: PathLike, port: int) -> None:
    creds = token_store.authorize(credentials, token, port=port)
    logger.info("Authorized", file=str(token), refreshable=creds.refresh_token is not None)


@cli.command("refresh-token")
@click.option(
    "-t",
    "--token",
    type=click.Path(exists=True, dir_okay=False),
    default=constants.TOKEN_FILE,
    help="The path to the token file",
)
@click.option(
    "--save/--no-save",
    type=bool,
    is_flag=True,
    default=True,
    help="Flag indicating whether to write the new access token back to the token file",
)
async def refresh_token(token: PathLike, save: bool) -> None:
    with ContactsClient(token_store.load_credentials(token)) as client:
        access_token = unwrap(await client.refresh_access_token())

    if save:
        token_store.save_access_token(token, access_token)
    print(access_token)  # noqa: T201
