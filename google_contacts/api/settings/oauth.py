from __future__ import annotations

from pydantic import BaseModel, Field


class OAuthSettings(BaseModel):
    client_id: str | None = Field(None, title="The OAuth application identifier")
    client_secret: str | None = Field(None, title="The OAuth application secret")
