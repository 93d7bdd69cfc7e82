from __future__ import annotations

import json
from functools import partial
from typing import TYPE_CHECKING, Any, Final, Self, TypeVar
from urllib.parse import urlencode

import anyio.to_thread
import requests
import structlog
from requests.adapters import HTTPAdapter
from urllib3 import Retry

from google_contacts.api import constants, feed, utils
from google_contacts.api.errors import (
    ContactsClientError,
    MalformedResponseError,
    MissingCredentialsError,
    PageLimitError,
    RemoteStatusError,
    TransportError,
)
from google_contacts.api.models import ContactRecord, Credentials, RequestParams, Result
from google_contacts.api.settings import settings

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType

    from google_contacts.api.settings import HttpSettings

logger = structlog.get_logger(__name__)

RetType = TypeVar("RetType")


class ContactsClient:
    """
    Client for the Google contacts feed.

    Example usage:
    >> with ContactsClient("ya29.token") as client:
    >>    contacts = (await client.get_contacts()).unwrap()
    """

    FEED_URL: Final[str] = f"https://{constants.FEED_HOST}"
    TOKEN_URL: Final[str] = f"https://{constants.TOKEN_HOST}{constants.TOKEN_PATH}"

    def __init__(
        self,
        credentials: str | Credentials | Mapping[str, Any] | None = None,
        *,
        http: HttpSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.credentials = self._to_credentials(credentials)
        self.http = http or settings.http
        self._owns_session = session is None
        self._session = session if session is not None else self._create_session()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: object,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Closes the underlying session if this client created it."""
        if self._owns_session:
            self._session.close()

    @property
    def access_token(self) -> str | None:
        return self.credentials.access_token

    def set_access_token(self, access_token: str) -> None:
        """Replaces the access token presented on subsequent requests."""
        self.credentials = self.credentials.model_copy(update={"access_token": access_token})

    async def get_contacts(self) -> Result[list[ContactRecord]]:
        """Fetches every page of the contacts feed."""
        return await self._complete(self._get_contacts)

    async def get_photo(self, path: str) -> Result[bytes]:
        """Fetches the photo bytes at the path (or photo URL) of a ContactRecord."""
        return await self._complete(self._get_photo, path)

    async def refresh_access_token(self, refresh_token: str | None = None, *, apply: bool = False) -> Result[str]:
        """
        Exchanges the refresh token for a new access token.

        Args:
            refresh_token (str | None): The refresh token (defaults to the stored one).
            apply (bool): Whether to present the new token on subsequent requests.
        Returns:
            A Result holding the new access token.
        """
        result = await self._complete(self._refresh_access_token, refresh_token)
        if apply and result.ok:
            self.set_access_token(result.unwrap())
        return result

    @staticmethod
    async def _complete(func: Callable[..., RetType], *args: Any) -> Result[RetType]:  # noqa: ANN401
        try:
            value = await anyio.to_thread.run_sync(partial(func, *args))
        except ContactsClientError as e:
            logger.warning("Request failed", operation=func.__name__, error=str(e))
            return Result.failure(e)
        return Result.success(value)

    def _get_contacts(self) -> list[ContactRecord]:
        # The accumulator belongs to this call; it is dropped if any page fails.
        contacts: list[ContactRecord] = []
        params = RequestParams()
        page_count = 1
        while True:
            page = feed.decode_feed(self._get(params))
            records = feed.extract_contacts(page)
            contacts.extend(records)
            logger.debug(
                "Page", page=page_count, entries=len(page.entries), extracted=len(records), length=len(contacts)
            )

            next_path = feed.find_next_path(page)
            if next_path is None:
                break

            if self.http.max_pages is not None and page_count >= self.http.max_pages:
                raise PageLimitError(self.http.max_pages)

            params = RequestParams(path=next_path)
            page_count += 1

        logger.info("Fetched contacts", pages=page_count, length=len(contacts))
        return contacts

    def _get_photo(self, path: str) -> bytes:
        return self._get_photo_data(RequestParams(path=utils.path_from_href(path)))

    def _get(self, params: RequestParams | None = None) -> Any:  # noqa: ANN401
        body, encoding = self._fetch("GET", self._feed_url(params), headers=self._auth_headers())
        return self._decode_json(body, encoding)

    def _get_photo_data(self, params: RequestParams | None = None) -> bytes:
        body, _ = self._fetch("GET", self._feed_url(params), headers=self._auth_headers())
        return bytes(body)

    def _refresh_access_token(self, refresh_token: str | None = None) -> str:
        data = {
            "refresh_token": self._require(refresh_token or self.credentials.refresh_token, "refresh_token"),
            "client_id": self._require(self._client_id, "client_id"),
            "client_secret": self._require(self._client_secret, "client_secret"),
            "grant_type": constants.REFRESH_GRANT_TYPE,
        }
        body, encoding = self._fetch(
            "POST",
            self.TOKEN_URL,
            headers={"Content-Type": constants.FORM_CONTENT_TYPE},
            data=urlencode(data),
        )
        payload = self._decode_json(body, encoding)
        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(access_token, str) or not access_token:
            msg = f"Token response has no access_token: {access_token!r}"
            raise MalformedResponseError(msg)

        logger.info("Refreshed access token")
        return access_token

    def _fetch(self, method: str, url: str, **kwargs: Any) -> tuple[bytearray, str | None]:  # noqa: ANN401
        """
        Issues the request and accumulates the whole body as raw bytes.

        :param method: The HTTP method
        :param url: The absolute URL
        :return: The body and the encoding advertised by the response.
        """
        body = bytearray()
        try:
            with self._session.request(method, url, stream=True, timeout=self.http.timeout, **kwargs) as response:
                for chunk in response.iter_content(chunk_size=self.http.chunk_size):
                    body.extend(chunk)
                status_code = response.status_code
                encoding = response.encoding
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        if not 200 <= status_code < 300:  # noqa: PLR2004
            raise RemoteStatusError(status_code, url)

        return body, encoding

    @staticmethod
    def _decode_json(body: bytearray, encoding: str | None) -> Any:  # noqa: ANN401
        try:
            return json.loads(body.decode(encoding or "utf-8"))
        except (ValueError, LookupError) as e:
            msg = f"Response is not valid JSON: {e}"
            raise MalformedResponseError(msg) from e

    def _feed_url(self, params: RequestParams | None) -> str:
        return f"{self.FEED_URL}{utils.build_path(params or RequestParams())}"

    def _auth_headers(self) -> dict[str, str]:
        token = self._require(self.credentials.access_token, "access_token")
        return {"Authorization": f"{constants.AUTH_SCHEME} {token}"}

    @property
    def _client_id(self) -> str | None:
        return self.credentials.client_id or (settings.oauth.client_id if settings.oauth else None)

    @property
    def _client_secret(self) -> str | None:
        return self.credentials.client_secret or (settings.oauth.client_secret if settings.oauth else None)

    @staticmethod
    def _require(value: str | None, field: str) -> str:
        if not value:
            raise MissingCredentialsError(field)
        return value

    @staticmethod
    def _to_credentials(credentials: str | Credentials | Mapping[str, Any] | None) -> Credentials:
        if credentials is None:
            return Credentials()
        if isinstance(credentials, Credentials):
            return credentials
        if isinstance(credentials, str):
            return Credentials(access_token=credentials)
        return Credentials.model_validate(dict(credentials))

    @staticmethod
    def _create_session() -> requests.Session:
        s = requests.Session()
        adapter = HTTPAdapter(max_retries=Retry(total=0, read=False))
        s.mount("https://", adapter)
        return s
