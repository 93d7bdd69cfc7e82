from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from google_contacts.api.settings.http import HttpSettings
from google_contacts.api.settings.oauth import OAuthSettings  # noqa: TC001


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GOOGLE_CONTACTS_", env_nested_delimiter="__")

    oauth: OAuthSettings | None = None
    http: HttpSettings = Field(default_factory=HttpSettings)
    log_level: str = Field("INFO", title="The lowest level to log")


settings = Settings()
