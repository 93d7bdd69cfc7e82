from google_contacts.cli.commands import auth, contacts
from google_contacts.cli.commands.common import cli

__all__ = ["auth", "cli", "contacts"]
