from fastapi import APIRouter, Depends
from pydantic import BaseModel

from fructosahel.deps import get_locale_context
from fructosahel.models import Locale
from fructosahel.services.locale import LocaleContext

router = APIRouter(prefix="/i18n", tags=["i18n"])


class MessagesResponse(BaseModel):
    locale: Locale
    messages: dict[str, str]


@router.get("/messages", response_model=MessagesResponse)
def get_messages(context: LocaleContext = Depends(get_locale_context)) -> MessagesResponse:
    return MessagesResponse(locale=context.locale, messages=dict(context.messages))
