from __future__ import annotations

import importlib.metadata

from google_contacts.api import constants, errors, feed
from google_contacts.api.client import ContactsClient
from google_contacts.api.models import ContactRecord, Credentials, RequestParams, Result

# set the version number within the package using importlib
try:
    __version__: str | None = importlib.metadata.version("google-contacts-feed")
except importlib.metadata.PackageNotFoundError:
    # package is not installed
    __version__ = None


__all__ = [
    "ContactRecord",
    "ContactsClient",
    "Credentials",
    "RequestParams",
    "Result",
    "__version__",
    "constants",
    "errors",
    "feed",
]
