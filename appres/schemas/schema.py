"""
A whole Appwrite layout in one document, e.g.

    {
      "database": "STYL Database",
      "collections": [
        {"name": "Users", "attributes": [
          {"kind": "string", "name": "name", "size": 128, "required": true},
          {"kind": "email", "name": "email", "required": true}
        ]}
      ],
      "buckets": [{"name": "wardrobe", "max_file_size": 10000000}]
    }
"""

from pathlib import Path
from typing import List, Union
from pydantic import BaseModel, StrictStr

from appres.schemas.attributes import AttributeDescriptor
from appres.schemas.buckets import BucketDescriptor

class CollectionDefinition(BaseModel):
    name: StrictStr
    attributes: List[AttributeDescriptor] = []

class SchemaDefinition(BaseModel):
    database: StrictStr
    collections: List[CollectionDefinition] = []
    buckets: List[BucketDescriptor] = []

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SchemaDefinition":
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))
