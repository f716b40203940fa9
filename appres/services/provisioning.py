from typing import Dict
import logging

from pydantic import BaseModel

from appres.schemas.schema import SchemaDefinition
from appres.services.appwrite import AppwriteContext
from appres.services.attributes import create_attribute
from appres.services.databases import create_collection, create_database
from appres.services.storage import create_bucket

logger = logging.getLogger(__name__)

class ProvisionResult(BaseModel):
    database_id: str
    collection_ids: Dict[str, str] = {}
    bucket_ids: Dict[str, str] = {}

def provision_schema(context: AppwriteContext, schema: SchemaDefinition) -> ProvisionResult:
    """
    Creates whatever part of `schema` is missing, in declaration order:
    database, then each collection with its attributes, then buckets.

    The first failure propagates; resources created before it are kept.
    """
    logger.info(f"--- Provisioning Appwrite schema for '{schema.database}' ---")

    database = create_database(context.databases, schema.database)
    result = ProvisionResult(database_id=database["$id"])

    for collection_def in schema.collections:
        collection = create_collection(context.databases, result.database_id, collection_def.name)
        result.collection_ids[collection_def.name] = collection["$id"]

        logger.info(f"Ensuring attributes for {collection_def.name}...")
        for attr in collection_def.attributes:
            create_attribute(context.databases, result.database_id, collection["$id"], attr)

    for bucket in schema.buckets:
        created = create_bucket(context.storage, bucket)
        result.bucket_ids[bucket.name] = created["$id"]

    logger.info(f"Schema setup complete. Database ID: {result.database_id}")
    return result
