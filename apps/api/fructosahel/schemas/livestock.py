from uuid import UUID

from fructosahel.models import LivestockType
from fructosahel.schemas.contract import CreateContract, ResourceSchema
from fructosahel.schemas.types import PositiveCount, ShortText


class LivestockCreateRequest(CreateContract):
    farm_id: UUID
    livestock_type: LivestockType
    breed: ShortText | None = None
    quantity: PositiveCount
    notes: str | None = None


livestock_schema = ResourceSchema.from_create("livestock", LivestockCreateRequest, immutable=("farm_id",))
LivestockUpdateRequest = livestock_schema.update_model
