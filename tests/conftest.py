from __future__ import annotations

import pytest

from google_contacts.api import ContactsClient
from google_contacts.api.settings import HttpSettings
from tests.fakes import FakeSession


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def http_settings() -> HttpSettings:
    return HttpSettings(timeout=5.0, max_pages=None, chunk_size=7)


@pytest.fixture
def client(session: FakeSession, http_settings: HttpSettings) -> ContactsClient:
    return ContactsClient(
        {"access_token": "TOKEN", "refresh_token": "REFRESH", "client_id": "ID", "client_secret": "SECRET"},
        http=http_settings,
        session=session.mock,
    )
