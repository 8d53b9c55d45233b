from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from fastapi import Request

from fructosahel.core.config import get_settings
from fructosahel.core.errors import LocaleConfigurationError
from fructosahel.models import Locale

SUPPORTED_LOCALES: tuple[Locale, ...] = tuple(Locale)
DEFAULT_LOCALE = Locale.EN
LOCALE_COOKIE = "NEXT_LOCALE"

logger = logging.getLogger("fructosahel.locale")


@dataclass(frozen=True)
class LocaleContext:
    locale: Locale
    messages: Mapping[str, str]


def resolve_locale(candidate: str | None) -> Locale:
    if candidate in SUPPORTED_LOCALES:
        return Locale(candidate)
    return DEFAULT_LOCALE


def _read_catalog(path: Path, locale: Locale) -> dict[str, str]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise LocaleConfigurationError(f"Missing message catalog for locale={locale.value} path={path}") from exc
    except json.JSONDecodeError as exc:
        raise LocaleConfigurationError(f"Malformed message catalog for locale={locale.value}: {exc}") from exc

    if not isinstance(payload, dict):
        raise LocaleConfigurationError(f"Message catalog for locale={locale.value} must be a JSON object")
    bad_keys = [key for key, value in payload.items() if not isinstance(value, str)]
    if bad_keys:
        raise LocaleConfigurationError(
            f"Message catalog for locale={locale.value} must be flat; non-string entries: {sorted(bad_keys)}"
        )
    return payload


@lru_cache(maxsize=None)
def load_catalog(locale: Locale, messages_dir: Path | None = None) -> Mapping[str, str]:
    directory = messages_dir or get_settings().messages_dir
    return MappingProxyType(_read_catalog(Path(directory) / f"{locale.value}.json", locale))


def check_catalogs(messages_dir: Path | None = None) -> None:
    """Load every supported catalog once, failing fast on a broken install."""
    catalogs = {locale: load_catalog(locale, messages_dir) for locale in SUPPORTED_LOCALES}
    reference = set(catalogs[DEFAULT_LOCALE])
    for locale, catalog in catalogs.items():
        missing = reference - set(catalog)
        if missing:
            logger.warning("Message catalog incomplete locale=%s missing_keys=%s", locale.value, sorted(missing))


async def resolve_request_locale(candidate_source: Awaitable[str | None]) -> LocaleContext:
    candidate = await candidate_source
    locale = resolve_locale(candidate)
    if candidate is not None and locale.value != candidate:
        logger.debug("Locale fallback candidate=%s resolved=%s", candidate, locale.value)
    return LocaleContext(locale=locale, messages=load_catalog(locale))


def translate(messages: Mapping[str, str], key: str, **params: object) -> str:
    template = messages.get(key)
    if template is None:
        return key
    return template.format(**params) if params else template


def _primary_subtag(tag: str) -> str:
    return tag.strip().lower().replace("_", "-").split("-", 1)[0]


def parse_accept_language(value: str | None) -> list[str]:
    """Return the primary language subtags of an Accept-Language header, best first."""
    if not value:
        return []

    weighted: list[tuple[float, str]] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        tag, _, params = part.partition(";")
        weight = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                weight = float(params[2:])
            except ValueError:
                weight = 0.0
        if weight > 0:
            weighted.append((weight, _primary_subtag(tag)))

    weighted.sort(key=lambda item: item[0], reverse=True)
    return [tag for _, tag in weighted]


def locale_prefix(path: str) -> str | None:
    segment = path.lstrip("/").split("/", 1)[0]
    return segment if segment in SUPPORTED_LOCALES else None


async def negotiate_locale_candidate(request: Request) -> str | None:
    prefixed = locale_prefix(request.url.path)
    if prefixed is not None:
        return prefixed

    cookie = request.cookies.get(LOCALE_COOKIE)
    if cookie:
        return cookie

    for tag in parse_accept_language(request.headers.get("accept-language")):
        if tag in SUPPORTED_LOCALES:
            return tag
    return None
