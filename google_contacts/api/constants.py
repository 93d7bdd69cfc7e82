from typing import Final

FEED_HOST: Final[str] = "www.google.com"
TOKEN_HOST: Final[str] = "accounts.google.com"
TOKEN_PATH: Final[str] = "/o/oauth2/token"  # noqa: S105

FEED_ROOT: Final[str] = "/m8/feeds"

DEFAULT_TYPE: Final[str] = "contacts"
DEFAULT_ALT: Final[str] = "json"
DEFAULT_PROJECTION: Final[str] = "thin"
DEFAULT_EMAIL: Final[str] = "default"
DEFAULT_MAX_RESULTS: Final[int] = 2000

NEXT_REL: Final[str] = "next"
PHOTO_REL_MARKER: Final[str] = "#photo"
IMAGE_TYPE_MARKER: Final[str] = "image"

AUTH_SCHEME: Final[str] = "OAuth"
FORM_CONTENT_TYPE: Final[str] = "application/x-www-form-urlencoded"
REFRESH_GRANT_TYPE: Final[str] = "refresh_token"  # noqa: S105

CHUNK_SIZE: Final[int] = 8192
DEFAULT_TIMEOUT: Final[float] = 30.0

# If modifying these scopes, delete the token file.
SCOPES: Final[list[str]] = [
    "https://www.googleapis.com/auth/contacts.readonly",
    "https://www.googleapis.com/auth/userinfo.email",
]

APP_NAME: Final[str] = "google-contacts-feed"
