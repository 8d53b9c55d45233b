import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from fructosahel.deps import get_locale_context
from fructosahel.schemas import RESOURCE_SCHEMAS, ResourceSchema, ValidationIssue, ValidationReport
from fructosahel.schemas.contract import render_issue
from fructosahel.services.locale import LocaleContext, translate

router = APIRouter(tags=["validation"])
logger = logging.getLogger("fructosahel.validation")


def validation_error_response(report: ValidationReport, context: LocaleContext) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": translate(context.messages, "validation.error"),
            "locale": context.locale.value,
            "details": [issue.model_dump() for issue in report.issues],
        },
    )


def _json_issue(exc: ValueError, context: LocaleContext) -> ValidationIssue:
    return render_issue("", "json_invalid", f"Invalid JSON: {exc}", context.messages)


async def _read_payload(request: Request, context: LocaleContext) -> Any:
    body = await request.body()
    try:
        return json.loads(body)
    except ValueError as exc:
        return ValidationReport(issues=[_json_issue(exc, context)])


async def _run_contract(request: Request, schema: ResourceSchema, contract: str, context: LocaleContext) -> JSONResponse:
    raw = await _read_payload(request, context)
    if isinstance(raw, ValidationReport):
        result = raw
    elif contract == "create":
        result = schema.validate_create(raw, context.messages)
    else:
        result = schema.validate_update(raw, context.messages)

    if isinstance(result, ValidationReport):
        logger.warning(
            "Payload rejected resource=%s contract=%s locale=%s paths=%s",
            schema.name,
            contract,
            context.locale.value,
            result.paths,
        )
        return validation_error_response(result, context)
    return JSONResponse(content={"data": result.payload()})


def _register(schema: ResourceSchema) -> None:
    path = f"/{schema.name}/validate"

    @router.post(path, name=f"validate_{schema.name}_create")
    async def validate_create(request: Request, context: LocaleContext = Depends(get_locale_context)) -> JSONResponse:
        return await _run_contract(request, schema, "create", context)

    @router.patch(path, name=f"validate_{schema.name}_update")
    async def validate_update(request: Request, context: LocaleContext = Depends(get_locale_context)) -> JSONResponse:
        return await _run_contract(request, schema, "update", context)


for _schema in RESOURCE_SCHEMAS.values():
    _register(_schema)
