"""
Attribute dispatcher.

ATTRIBUTE_CREATORS maps every AttributeKind to the Databases method that
creates it and to a builder producing that method's arguments. The
descriptor models in appres.schemas.attributes do the validation, so by the
time a builder runs every value already has the right type.
"""

from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple, Union
import logging

from appwrite.exception import AppwriteException
from appwrite.services.databases import Databases
from pydantic import BaseModel

from appres.schemas.attributes import (
    AttributeKind,
    BooleanAttribute,
    DatetimeAttribute,
    EmailAttribute,
    IntegerAttribute,
    RelationshipAttribute,
    StringAttribute,
    UrlAttribute,
    attribute_kind,
    describe,
    parse_attribute,
)
from appres.services.appwrite import as_dict

logger = logging.getLogger(__name__)

CallArguments = Tuple[Tuple[Any, ...], Dict[str, Any]]

class AttributeCreator(NamedTuple):
    method: str
    build: Callable[[Any], CallArguments]

def _default_option(attr) -> Dict[str, Any]:
    # Appwrite refuses a default on a required attribute.
    if not attr.required and attr.default is not None:
        return {"default": attr.default}
    return {}

def _string_arguments(attr: StringAttribute) -> CallArguments:
    options = _default_option(attr)
    options["array"] = attr.array
    options["encrypt"] = attr.encrypt
    return (attr.name, attr.size, attr.required), options

def _email_arguments(attr: EmailAttribute) -> CallArguments:
    options = _default_option(attr)
    options["array"] = attr.array
    return (attr.name, attr.required), options

def _url_arguments(attr: UrlAttribute) -> CallArguments:
    options = {}
    if attr.default is not None:
        options["default"] = attr.default
    options["array"] = attr.array
    return (attr.name, attr.required), options

def _integer_arguments(attr: IntegerAttribute) -> CallArguments:
    options = _default_option(attr)
    if attr.min is not None:
        options["min"] = attr.min
    if attr.max is not None:
        options["max"] = attr.max
    options["array"] = attr.array
    return (attr.name, attr.required), options

def _datetime_arguments(attr: DatetimeAttribute) -> CallArguments:
    options = _default_option(attr)
    options["array"] = attr.array
    return (attr.name, attr.required), options

def _boolean_arguments(attr: BooleanAttribute) -> CallArguments:
    options = _default_option(attr)
    options["array"] = attr.array
    return (attr.name, attr.required), options

def _relationship_arguments(attr: RelationshipAttribute) -> CallArguments:
    options = {"two_way": attr.two_way}
    if attr.name:
        options["key"] = attr.name
    if attr.on_delete is not None:
        options["on_delete"] = attr.on_delete
    if attr.two_way_key:
        options["two_way_key"] = attr.two_way_key
    return (attr.related_collection_id, attr.relationship_type), options

ATTRIBUTE_CREATORS: Dict[AttributeKind, AttributeCreator] = {
    AttributeKind.STRING: AttributeCreator("create_string_attribute", _string_arguments),
    AttributeKind.EMAIL: AttributeCreator("create_email_attribute", _email_arguments),
    AttributeKind.INTEGER: AttributeCreator("create_integer_attribute", _integer_arguments),
    AttributeKind.DATETIME: AttributeCreator("create_datetime_attribute", _datetime_arguments),
    AttributeKind.BOOLEAN: AttributeCreator("create_boolean_attribute", _boolean_arguments),
    AttributeKind.RELATIONSHIP: AttributeCreator("create_relationship_attribute", _relationship_arguments),
    AttributeKind.URL: AttributeCreator("create_url_attribute", _url_arguments),
}

def attribute_exists(db_service: Databases, db_id: str, coll_id: str, key: Optional[str]) -> bool:
    """
    Checks whether collection `coll_id` already has an attribute keyed `key`.
    """
    try:
        existing = as_dict(db_service.list_attributes(db_id, coll_id))
    except AppwriteException as e:
        logger.error(f"Error listing attributes of collection {coll_id}: {e}")
        raise e

    for attr in existing.get("attributes", []):
        if key and as_dict(attr).get("key") == key:
            return True
    return False

def create_attribute(
    db_service: Databases,
    db_id: str,
    coll_id: str,
    descriptor: Union[BaseModel, Mapping[str, Any]],
) -> Optional[Dict[str, Any]]:
    """
    Creates the attribute described by `descriptor` in collection `coll_id`.

    `descriptor` is one of the models in appres.schemas.attributes or a plain
    mapping with a "kind" key.

    Returns None when an attribute with the same key already exists; the
    descriptor is not examined further and nothing is created. Otherwise the
    descriptor is validated before the create call: an unknown kind raises
    UnsupportedAttributeTypeError, a value of the wrong type raises
    AttributeValidationError. Errors reported by Appwrite are re-raised
    unchanged.
    """
    if isinstance(descriptor, Mapping):
        key = descriptor.get("name")
    else:
        key = getattr(descriptor, "name", None)

    if attribute_exists(db_service, db_id, coll_id, key):
        logger.info(f"Attribute already exists with key: {key}")
        return None

    attr = parse_attribute(descriptor)
    creator = ATTRIBUTE_CREATORS[attribute_kind(attr)]

    args, options = creator.build(attr)
    logger.debug(f"Creating attribute {describe(attr)} in collection {coll_id}")
    try:
        created = as_dict(getattr(db_service, creator.method)(db_id, coll_id, *args, **options))
    except AppwriteException as e:
        logger.error(f"Error creating attribute '{attr.name}': {e}")
        raise e

    logger.info(f"Attribute created with key: {created.get('key')}")
    return created
