from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from geojson_api.api.deps import get_app_settings
from geojson_api.core.health_checks import check_mongodb
from geojson_api.core.settings import Settings
from geojson_api.core.utils import utcnow
from geojson_api.models.base.health import HealthCheck

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthCheck,
    summary="Health check de l'API",
    description="Retourne le statut de l'API et de MongoDB.",
)
async def health(request: Request, settings: Settings = Depends(get_app_settings)) -> JSONResponse:
    """
    Health check endpoint standard

    Returns:
        200 si MongoDB répond, 503 sinon
    """
    checks = {
        "database": await check_mongodb(request.app.state.store),
    }

    has_errors = any(check != "ok" for check in checks.values())
    overall_status = "degraded" if has_errors else "ok"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE if has_errors else status.HTTP_200_OK

    response = HealthCheck(
        status=overall_status,
        timestamp=utcnow(),
        version=settings.api_version,
        checks=checks,
    )

    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))
