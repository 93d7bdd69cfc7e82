from google_contacts.api.settings.base import Settings, settings
from google_contacts.api.settings.http import HttpSettings
from google_contacts.api.settings.oauth import OAuthSettings

__all__ = ["HttpSettings", "OAuthSettings", "Settings", "settings"]
