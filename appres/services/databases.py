from typing import Any, Dict
import logging

from appwrite.exception import AppwriteException
from appwrite.id import ID
from appwrite.services.databases import Databases

from appres.services.appwrite import as_dict

logger = logging.getLogger(__name__)

def create_database(db_service: Databases, name: str) -> Dict[str, Any]:
    """
    Returns the database called `name`, creating it if no such database exists.
    """
    try:
        existing = as_dict(db_service.list())
    except AppwriteException as e:
        logger.error(f"Error listing databases: {e}")
        raise e

    for database in existing.get("databases", []):
        database = as_dict(database)
        if database.get("name") == name:
            logger.info(f"Database '{name}' already exists with id: {database.get('$id')}")
            return database

    try:
        database = as_dict(db_service.create(ID.unique(), name))
    except AppwriteException as e:
        logger.error(f"Error creating database '{name}': {e}")
        raise e

    logger.info(f"Database '{name}' created with id: {database.get('$id')}")
    return database

def create_collection(db_service: Databases, db_id: str, name: str) -> Dict[str, Any]:
    """
    Returns the collection called `name` in database `db_id`, creating it if
    no such collection exists.
    """
    try:
        existing = as_dict(db_service.list_collections(db_id))
    except AppwriteException as e:
        logger.error(f"Error listing collections of database {db_id}: {e}")
        raise e

    for collection in existing.get("collections", []):
        collection = as_dict(collection)
        if collection.get("name") == name:
            logger.info(f"Collection '{name}' already exists with id: {collection.get('$id')}")
            return collection

    try:
        collection = as_dict(db_service.create_collection(db_id, ID.unique(), name))
    except AppwriteException as e:
        logger.error(f"Error creating collection '{name}': {e}")
        raise e

    logger.info(f"Collection '{name}' created with id: {collection.get('$id')}")
    return collection
