from typing import Annotated

from pydantic import AnyUrl, StringConstraints

from fructosahel.models import Locale, UserRole
from fructosahel.schemas.contract import CreateContract, ResourceSchema
from fructosahel.schemas.types import EmailAddress, RequiredName

PhoneNumber = Annotated[str, StringConstraints(max_length=50)]


class UserCreateRequest(CreateContract):
    email: EmailAddress
    name: RequiredName
    role: UserRole = UserRole.VIEWER
    avatar_url: AnyUrl | None = None
    phone: PhoneNumber | None = None
    language: Locale = Locale.EN


user_schema = ResourceSchema.from_create("users", UserCreateRequest, immutable=("email",))
UserUpdateRequest = user_schema.update_model
