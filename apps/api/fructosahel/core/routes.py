"""Account-lifecycle route table handed to the external identity provider."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from fructosahel.core.config import Settings, get_settings
from fructosahel.core.errors import RouteConfigurationError


class AccountRoutes(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    home: str = "/"
    handler: str = "/handler"
    sign_in: str = "/handler/sign-in"
    sign_up: str = "/handler/sign-up"
    after_sign_in: str = "/dashboard"
    after_sign_up: str = "/dashboard"
    sign_out: str = "/"
    account_settings: str = "/handler/account-settings"

    @field_validator("*")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("route paths must start with '/'")
        return value

    def as_table(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


def build_account_routes(settings: Settings) -> AccountRoutes:
    try:
        return AccountRoutes(
            home=settings.route_home,
            handler=settings.route_handler,
            sign_in=settings.route_sign_in,
            sign_up=settings.route_sign_up,
            after_sign_in=settings.route_after_sign_in,
            after_sign_up=settings.route_after_sign_up,
            sign_out=settings.route_sign_out,
            account_settings=settings.route_account_settings,
        )
    except ValidationError as exc:
        problems = ", ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise RouteConfigurationError(f"Invalid account route table: {problems}") from exc


@lru_cache(maxsize=1)
def get_account_routes() -> AccountRoutes:
    return build_account_routes(get_settings())
