from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import structlog
from google_auth_oauthlib.flow import InstalledAppFlow

from google_contacts.api import constants
from google_contacts.api.models import Credentials

if TYPE_CHECKING:
    from os import PathLike

logger = structlog.get_logger(__name__)


def load_credentials(token_file: PathLike) -> Credentials:
    """
    Reads an authorized-user token file (as written by google-auth) into Credentials.

    Args:
        token_file (PathLike): The path to the token file.
    Returns:
        The Credentials; fields absent from the file are None.
    """
    path = Path(token_file)
    logger.debug("Loading", file=str(path))
    return Credentials.model_validate_json(path.read_text())


def save_access_token(token_file: PathLike, access_token: str) -> None:
    """Replaces the access token stored in the token file, keeping every other field."""
    path = Path(token_file)
    payload = json.loads(path.read_text()) if path.exists() else {}
    payload["token"] = access_token
    logger.info("Saving token", file=str(path))
    path.write_text(json.dumps(payload))


def authorize(client_secrets_file: PathLike, token_file: PathLike, port: int = 0) -> Credentials:
    """
    Runs the installed-application consent flow and writes the resulting token file.

    Args:
        client_secrets_file (PathLike): The OAuth client secrets downloaded from the Google console.
        token_file (PathLike): Where to write the authorized-user token.
        port (int): The local redirect port (0 picks a free one).
    Returns:
        The Credentials that were written.
    """
    flow = InstalledAppFlow.from_client_secrets_file(str(client_secrets_file), constants.SCOPES)
    creds = flow.run_local_server(port=port)
    path = Path(token_file)
    logger.info("Saving token", file=str(path))
    path.write_text(creds.to_json())
    return Credentials.model_validate_json(creds.to_json())
