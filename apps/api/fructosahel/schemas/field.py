from uuid import UUID

from fructosahel.schemas.contract import CreateContract, ResourceSchema
from fructosahel.schemas.types import PositiveNumber, RequiredName, ShortText


class FieldCreateRequest(CreateContract):
    farm_id: UUID
    name: RequiredName
    size_hectares: PositiveNumber
    soil_type: ShortText | None = None
    irrigation_type: ShortText | None = None
    notes: str | None = None


field_schema = ResourceSchema.from_create("fields", FieldCreateRequest, immutable=("farm_id",))
FieldUpdateRequest = field_schema.update_model
