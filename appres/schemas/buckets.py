from typing import List
from appwrite.enums.compression import Compression
from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

# Largest file Appwrite Cloud accepts per bucket, in bytes.
MAX_FILE_SIZE_LIMIT = 30_000_000

class BucketDescriptor(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: StrictStr
    permissions: List[str] = []
    file_security: bool = False
    enabled: bool = True
    # The range check lives in create_bucket so that it fails at creation time.
    max_file_size: StrictInt = MAX_FILE_SIZE_LIMIT
    allowed_file_extensions: List[str] = []
    compression: Compression = Compression.NONE
    encryption: bool = False
    antivirus: bool = False
