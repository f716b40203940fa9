from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

from appwrite.client import Client
from appwrite.services.databases import Databases
from appwrite.services.storage import Storage

from appres.core.config import Settings, settings
from appres.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

def get_appwrite_client(config: Optional[Settings] = None) -> Client:
    """
    Returns a configured Appwrite Client instance.
    Raises ConfigurationError if the endpoint, project id or API key is empty.
    """
    if config is None:
        config = settings

    missing = config.missing_credentials()
    if missing:
        raise ConfigurationError(missing)

    client = Client()
    client.set_endpoint(config.APPWRITE_ENDPOINT_URL)
    client.set_project(config.APPWRITE_PROJECT_ID)
    client.set_key(config.APPWRITE_API_KEY_APPRES)
    if config.APPWRITE_SELF_SIGNED:
        client.set_self_signed(True)
    logger.debug(f"Appwrite client configured for {config.APPWRITE_ENDPOINT_URL}")
    return client

def get_appwrite_db(client: Client = None) -> Databases:
    """
    Returns a configured Appwrite Databases service instance.
    """
    if client is None:
        client = get_appwrite_client()
    return Databases(client)

def get_appwrite_storage(client: Client = None) -> Storage:
    """
    Returns a configured Appwrite Storage service instance.
    """
    if client is None:
        client = get_appwrite_client()
    return Storage(client)

@dataclass(frozen=True)
class AppwriteContext:
    """
    The handles every provisioning call needs, built once and passed around
    explicitly. Read-only after construction.
    """

    client: Client
    databases: Databases
    storage: Storage

    @staticmethod
    def from_settings(config: Optional[Settings] = None) -> "AppwriteContext":
        client = get_appwrite_client(config)
        return AppwriteContext(
            client=client,
            databases=get_appwrite_db(client),
            storage=get_appwrite_storage(client),
        )

def as_dict(resource: Any) -> Dict[str, Any]:
    """
    Normalises an SDK response to a plain dict.

    Older SDK releases return dicts, newer ones return pydantic models with
    `to_dict()`; both expose the raw Appwrite keys ("$id", "name", "key").
    """
    if resource is None:
        return {}
    if isinstance(resource, dict):
        return resource
    if hasattr(resource, "to_dict"):
        return resource.to_dict()
    return dict(resource)
