"""
Declarative attribute descriptors.

One model per attribute kind; each carries only the fields that kind accepts.
Values are strictly typed, so a descriptor holding a default of the wrong
type cannot be constructed. Fields that do not belong to a kind are ignored.
"""

import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union

from appwrite.enums.relation_mutate import RelationMutate
from appwrite.enums.relationship_type import RelationshipType
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError, field_validator

from appres.core.exceptions import AttributeValidationError, UnsupportedAttributeTypeError

class AttributeKind(str, Enum):
    STRING = "string"
    EMAIL = "email"
    INTEGER = "integer"
    DATETIME = "datetime"
    BOOLEAN = "boolean"
    RELATIONSHIP = "relationship"
    URL = "url"

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)

def parse_rfc3339(value: str) -> datetime:
    """
    Parses a timestamp such as "2024-05-01T12:30:00Z" or
    "2024-05-01T12:30:00.250+02:00". Raises ValueError otherwise.
    """
    match = _RFC3339.fullmatch(value)
    if not match:
        raise ValueError(f"{value!r} is not in RFC3339 format")

    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction, offset = match.group(7), match.group(8)

    if offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = 1 if offset[0] == "+" else -1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise ValueError(f"{value!r} has an invalid UTC offset")
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

    microsecond = int(fraction[1:7].ljust(6, "0")) if fraction else 0
    # datetime() rejects out of range fields (month 13, hour 24, ...)
    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)

class _Attribute(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: StrictStr
    required: bool = False
    array: bool = False

class StringAttribute(_Attribute):
    kind: Literal["string"] = "string"
    size: StrictInt
    default: Optional[StrictStr] = None
    encrypt: bool = False

class EmailAttribute(_Attribute):
    kind: Literal["email"] = "email"
    default: Optional[StrictStr] = None

class UrlAttribute(_Attribute):
    kind: Literal["url"] = "url"
    default: Optional[StrictStr] = None

class IntegerAttribute(_Attribute):
    # min > max is not rejected here; the service decides.
    kind: Literal["integer"] = "integer"
    default: Optional[StrictInt] = None
    min: Optional[StrictInt] = None
    max: Optional[StrictInt] = None

class DatetimeAttribute(_Attribute):
    kind: Literal["datetime"] = "datetime"
    default: Optional[StrictStr] = None

    @field_validator("default")
    @classmethod
    def check_rfc3339(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        try:
            parse_rfc3339(v)
        except ValueError as e:
            raise ValueError(
                f"default value for datetime attribute must be a valid RFC3339 datetime string: {e}"
            )
        return v

class BooleanAttribute(_Attribute):
    kind: Literal["boolean"] = "boolean"
    default: Optional[StrictBool] = None

class RelationshipAttribute(_Attribute):
    """
    `name` becomes the attribute key when given; otherwise Appwrite derives
    the key from the related collection.
    """

    kind: Literal["relationship"] = "relationship"
    name: Optional[StrictStr] = None
    related_collection_id: StrictStr
    relationship_type: RelationshipType
    two_way: bool = False
    two_way_key: Optional[StrictStr] = None
    on_delete: Optional[RelationMutate] = None

AttributeDescriptor = Annotated[
    Union[
        StringAttribute,
        EmailAttribute,
        IntegerAttribute,
        DatetimeAttribute,
        BooleanAttribute,
        RelationshipAttribute,
        UrlAttribute,
    ],
    Field(discriminator="kind"),
]

ATTRIBUTE_MODELS = {
    AttributeKind.STRING: StringAttribute,
    AttributeKind.EMAIL: EmailAttribute,
    AttributeKind.INTEGER: IntegerAttribute,
    AttributeKind.DATETIME: DatetimeAttribute,
    AttributeKind.BOOLEAN: BooleanAttribute,
    AttributeKind.RELATIONSHIP: RelationshipAttribute,
    AttributeKind.URL: UrlAttribute,
}

def parse_attribute(data: Union[Mapping[str, Any], BaseModel]) -> BaseModel:
    """
    Turns a mapping such as {"kind": "integer", "name": "age", "min": 0}
    into the matching descriptor model. Descriptor models pass through.
    """
    if isinstance(data, tuple(ATTRIBUTE_MODELS.values())):
        return data
    if not isinstance(data, Mapping):
        raise UnsupportedAttributeTypeError(getattr(data, "kind", None))

    kind = data.get("kind")
    try:
        model = ATTRIBUTE_MODELS[AttributeKind(kind)]
    except ValueError:
        raise UnsupportedAttributeTypeError(kind)

    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        raise AttributeValidationError(f"invalid {kind} attribute {data.get('name')!r}: {e}")

def attribute_kind(descriptor: BaseModel) -> AttributeKind:
    return AttributeKind(descriptor.kind)

def describe(descriptor: BaseModel) -> Dict[str, Any]:
    """Descriptor as a JSON-ready dict, for logs."""
    return descriptor.model_dump(mode="json", exclude_none=True)
