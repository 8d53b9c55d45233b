from fastapi import Request

from fructosahel.services.locale import LocaleContext, negotiate_locale_candidate, resolve_request_locale


async def get_locale_context(request: Request) -> LocaleContext:
    return await resolve_request_locale(negotiate_locale_candidate(request))
