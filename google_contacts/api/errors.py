from __future__ import annotations


class ContactsClientError(Exception):
    """Base class for every failure reported by the ContactsClient."""


class TransportError(ContactsClientError):
    """The connection failed before a complete response was obtained."""


class RemoteStatusError(ContactsClientError):
    """The remote service answered with a status outside [200, 300)."""

    def __init__(self, status_code: int, url: str | None = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Bad client request status: {status_code}")


class MalformedResponseError(ContactsClientError):
    """The response body could not be decoded into the expected document."""


class MissingCredentialsError(ContactsClientError, ValueError):
    """A credential needed by the requested operation was never supplied."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing credential: {field}")


class PageLimitError(ContactsClientError):
    """The feed kept emitting next links past the configured page cap."""

    def __init__(self, max_pages: int) -> None:
        self.max_pages = max_pages
        super().__init__(f"More than {max_pages} pages in the contacts feed")
