from fastapi import APIRouter, Depends

from fructosahel.core.routes import AccountRoutes, get_account_routes

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/routes", response_model=dict[str, str])
def account_routes(routes: AccountRoutes = Depends(get_account_routes)) -> dict[str, str]:
    return routes.as_table()
