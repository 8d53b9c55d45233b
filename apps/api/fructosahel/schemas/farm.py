from typing import Annotated
from uuid import UUID

from pydantic import Field, StringConstraints

from fructosahel.models import Country
from fructosahel.schemas.contract import CreateContract, ResourceSchema
from fructosahel.schemas.types import PositiveNumber, RequiredName

Location = Annotated[str, StringConstraints(min_length=1, max_length=255)]
Latitude = Annotated[float, Field(ge=-90, le=90)]
Longitude = Annotated[float, Field(ge=-180, le=180)]


class FarmCreateRequest(CreateContract):
    name: RequiredName
    location: Location
    country: Country
    size_hectares: PositiveNumber
    latitude: Latitude | None = None
    longitude: Longitude | None = None
    description: str | None = None
    manager_id: UUID | None = None


farm_schema = ResourceSchema.from_create("farms", FarmCreateRequest)
FarmUpdateRequest = farm_schema.update_model
