from __future__ import annotations

from pydantic import BaseModel, Field, PositiveInt

from google_contacts.api import constants


class HttpSettings(BaseModel):
    timeout: float | None = Field(constants.DEFAULT_TIMEOUT, title="The per-request timeout in seconds")
    max_pages: PositiveInt | None = Field(None, title="The maximum number of feed pages to follow")
    chunk_size: PositiveInt = Field(constants.CHUNK_SIZE, title="The size of the response body reads")
