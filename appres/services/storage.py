from typing import Any, Dict
import logging

from appwrite.enums.compression import Compression
from appwrite.exception import AppwriteException
from appwrite.id import ID
from appwrite.services.storage import Storage

from appres.core.exceptions import BucketSizeError
from appres.schemas.buckets import MAX_FILE_SIZE_LIMIT, BucketDescriptor
from appres.services.appwrite import as_dict

logger = logging.getLogger(__name__)

def create_bucket(storage: Storage, bucket: BucketDescriptor) -> Dict[str, Any]:
    """
    Creates a storage bucket from `bucket` and returns it.

    Raises BucketSizeError, without contacting Appwrite, when
    `bucket.max_file_size` is outside 0..MAX_FILE_SIZE_LIMIT bytes.
    """
    if bucket.max_file_size < 0 or bucket.max_file_size > MAX_FILE_SIZE_LIMIT:
        raise BucketSizeError(bucket.max_file_size, MAX_FILE_SIZE_LIMIT)

    options = {
        "file_security": bucket.file_security,
        "enabled": bucket.enabled,
        "maximum_file_size": bucket.max_file_size,
        "encryption": bucket.encryption,
        "antivirus": bucket.antivirus,
    }
    if bucket.permissions:
        options["permissions"] = list(bucket.permissions)
    if bucket.allowed_file_extensions:
        options["allowed_file_extensions"] = list(bucket.allowed_file_extensions)
    if bucket.compression != Compression.NONE:
        options["compression"] = bucket.compression

    try:
        created = as_dict(storage.create_bucket(ID.unique(), bucket.name, **options))
    except AppwriteException as e:
        logger.error(f"Error creating bucket '{bucket.name}': {e}")
        raise e

    logger.info(f"Bucket '{bucket.name}' created with id: {created.get('$id')}")
    return created
