from fructosahel.schemas.contract import (
    CreateContract,
    ResourceSchema,
    UpdateContract,
    ValidationIssue,
    ValidationReport,
    derive_update_model,
)
from fructosahel.schemas.farm import FarmCreateRequest, FarmUpdateRequest, farm_schema
from fructosahel.schemas.field import FieldCreateRequest, FieldUpdateRequest, field_schema
from fructosahel.schemas.livestock import LivestockCreateRequest, LivestockUpdateRequest, livestock_schema
from fructosahel.schemas.user import UserCreateRequest, UserUpdateRequest, user_schema

RESOURCE_SCHEMAS: dict[str, ResourceSchema] = {
    schema.name: schema for schema in (farm_schema, field_schema, livestock_schema, user_schema)
}

__all__ = [
    "CreateContract",
    "FarmCreateRequest",
    "FarmUpdateRequest",
    "FieldCreateRequest",
    "FieldUpdateRequest",
    "LivestockCreateRequest",
    "LivestockUpdateRequest",
    "RESOURCE_SCHEMAS",
    "ResourceSchema",
    "UpdateContract",
    "UserCreateRequest",
    "UserUpdateRequest",
    "ValidationIssue",
    "ValidationReport",
    "derive_update_model",
    "farm_schema",
    "field_schema",
    "livestock_schema",
    "user_schema",
]
