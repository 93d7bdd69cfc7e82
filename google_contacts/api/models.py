from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NamedTuple, TypeVar, cast

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from google_contacts.api import constants

if TYPE_CHECKING:
    from google_contacts.api.errors import ContactsClientError

T = TypeVar("T")


class Credentials(BaseModel):
    model_config = ConfigDict(extra="ignore")

    access_token: str | None = Field(
        None,
        title="The bearer token presented on every request",
        validation_alias=AliasChoices("access_token", "token"),
    )
    refresh_token: str | None = Field(None, title="The token exchanged for a new access token")
    client_id: str | None = Field(None, title="The OAuth application identifier")
    client_secret: str | None = Field(None, title="The OAuth application secret")


class ContactRecord(NamedTuple):
    id: str
    name: str
    email: str
    photo_url: str
    mime_type: str

    def __repr__(self) -> str:
        return f"{self.name} <{self.email}>"


class RequestParams(NamedTuple):
    type: str = constants.DEFAULT_TYPE
    alt: str = constants.DEFAULT_ALT
    projection: str = constants.DEFAULT_PROJECTION
    email: str = constants.DEFAULT_EMAIL
    max_results: int = constants.DEFAULT_MAX_RESULTS
    path: str | None = None


class Result(NamedTuple, Generic[T]):
    """
    The outcome of a client operation: exactly one of value or error.

    Example usage:
    >> result = await client.get_contacts()
    >> if result.ok:
    >>    contacts = result.value
    """

    value: T | None = None
    error: ContactsClientError | None = None

    @property
    def ok(self) -> bool:
        """Gets a value indicating whether the operation succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Returns the value or raises the carried error."""
        if self.error is not None:
            raise self.error
        return cast("T", self.value)

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value, None)

    @classmethod
    def failure(cls, error: ContactsClientError) -> Result[T]:
        return cls(None, error)
