"""Shared test fixtures for appres tests."""

from unittest.mock import MagicMock

import pytest

from appres.core.config import Settings
from appres.services.appwrite import AppwriteContext

APPWRITE_ENV_VARS = [
    "APPWRITE_ENDPOINT_URL",
    "NEXT_PUBLIC_APPWRITE_ENDPOINT",
    "APPWRITE_ENDPOINT",
    "APPWRITE_PROJECT_ID",
    "NEXT_PUBLIC_APPWRITE_PROJECT",
    "APPWRITE_API_KEY_APPRES",
    "APPWRITE_API_KEY_RESDEF",
    "APPWRITE_API_KEY",
    "APPWRITE_SELF_SIGNED",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any Appwrite settings inherited from the shell."""
    for name in APPWRITE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings(clean_env):
    return Settings(
        _env_file=None,
        APPWRITE_ENDPOINT_URL="https://appwrite.example.com/v1",
        APPWRITE_PROJECT_ID="test-project",
        APPWRITE_API_KEY_APPRES="test-key",
    )


@pytest.fixture
def db_service():
    """A Databases stand-in whose listings start out empty."""
    db = MagicMock()
    db.list.return_value = {"total": 0, "databases": []}
    db.list_collections.return_value = {"total": 0, "collections": []}
    db.list_attributes.return_value = {"total": 0, "attributes": []}
    return db


@pytest.fixture
def storage_service():
    storage = MagicMock()
    storage.create_bucket.side_effect = lambda bucket_id, name, **kwargs: {
        "$id": bucket_id,
        "name": name,
        **kwargs,
    }
    return storage


@pytest.fixture
def context(db_service, storage_service):
    return AppwriteContext(client=MagicMock(), databases=db_service, storage=storage_service)


@pytest.fixture
def create_calls():
    """Names of every create_* method called on a service stand-in."""
    def names(mock_service):
        return [name for name, _, _ in mock_service.method_calls if name.startswith("create")]
    return names
