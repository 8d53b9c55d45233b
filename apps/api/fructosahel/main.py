import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from fructosahel.core.config import get_settings
from fructosahel.core.logging import configure_logging
from fructosahel.core.monitoring import bootstrap_monitoring
from fructosahel.core.routes import get_account_routes
from fructosahel.routers import auth, i18n, resources
from fructosahel.schemas import ValidationReport
from fructosahel.schemas.contract import issue_from_error
from fructosahel.services.locale import check_catalogs, negotiate_locale_candidate, resolve_request_locale
from fructosahel.services.routing import route_request

configure_logging()
logger = logging.getLogger("fructosahel.validation")
settings = get_settings()
allowed_origins = [origin.strip() for origin in settings.cors_allowed_origins.split(",") if origin.strip()]

app = FastAPI(title="FructoSahel API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins or ["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api/v1")
app.include_router(i18n.router, prefix="/api/v1")
app.include_router(resources.router, prefix="/api/v1")


@app.on_event("startup")
def startup_event() -> None:
    check_catalogs(settings.messages_dir)
    routes = get_account_routes()
    logger.info("Startup checks passed locales=ok routes=%s", len(routes.as_table()))


@app.middleware("http")
async def locale_routing(request: Request, call_next):
    decision = route_request(request.url.path, request.cookies, get_account_routes())
    request.state.locale = decision.locale
    if decision.redirect_to is not None:
        logger.info("Redirecting unauthenticated request path=%s target=%s", request.url.path, decision.redirect_to)
        return RedirectResponse(decision.redirect_to, status_code=307)
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    context = await resolve_request_locale(negotiate_locale_candidate(request))
    report = ValidationReport(issues=[issue_from_error(error, context.messages) for error in exc.errors()])
    logger.warning(
        "Request validation failed path=%s method=%s paths=%s",
        request.url.path,
        request.method,
        report.paths,
    )
    return resources.validation_error_response(report, context)


bootstrap_monitoring(app, settings.app_runtime)


@app.get("/healthz", tags=["health"])
def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
