from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlencode

from fructosahel.core.routes import AccountRoutes
from fructosahel.services.locale import DEFAULT_LOCALE, locale_prefix

PROTECTED_PREFIXES = ("/dashboard",)
SESSION_COOKIES = ("stack-refresh-token", "stack-access-token")
RETURN_TO_PARAM = "after_auth_return_to"

_UNGATED = re.compile(r"^/(api|_next|_vercel)(/|$)|\.[^/]*$")


@dataclass(frozen=True)
class RoutingDecision:
    locale: str
    redirect_to: str | None = None


def strip_locale(path: str) -> tuple[str | None, str]:
    prefix = locale_prefix(path)
    if prefix is None:
        return None, path
    rest = path[len(prefix) + 1 :]
    return prefix, rest or "/"


def is_gated_path(path: str) -> bool:
    return _UNGATED.search(path) is None


def has_session(cookies: Mapping[str, str]) -> bool:
    return any(cookies.get(name) for name in SESSION_COOKIES)


def route_request(path: str, cookies: Mapping[str, str], routes: AccountRoutes) -> RoutingDecision:
    prefix, bare_path = strip_locale(path)
    locale = prefix or DEFAULT_LOCALE.value
    if not is_gated_path(path):
        return RoutingDecision(locale=locale)

    protected = any(bare_path.startswith(route) for route in PROTECTED_PREFIXES)
    auth_route = bare_path.startswith(routes.handler)
    if protected and not auth_route and not has_session(cookies):
        query = urlencode({RETURN_TO_PARAM: path})
        return RoutingDecision(locale=locale, redirect_to=f"/{locale}{routes.sign_in}?{query}")
    return RoutingDecision(locale=locale)
