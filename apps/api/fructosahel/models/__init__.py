from fructosahel.models.enums import (
    Country,
    LivestockType,
    Locale,
    RenderContext,
    RuntimeMode,
    UserRole,
)

__all__ = [
    "Country",
    "LivestockType",
    "Locale",
    "RenderContext",
    "RuntimeMode",
    "UserRole",
]
