from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.api.deps import DatabaseDep
from app.models import HealthStatus

router = APIRouter(tags=["utils"])

STATUS_OK = "OK"
STATUS_DB_UNAVAILABLE = "DB_UNAVAILABLE"


@router.get("/health", response_model=HealthStatus)
def health_check(db: DatabaseDep) -> HealthStatus | JSONResponse:
    """
    Liveness probe that also pings the store.

    Returns 200 with ``{"status": "OK"}`` when the store answers and 503 with
    ``{"status": "DB_UNAVAILABLE"}`` otherwise, so monitors can parse either.
    """
    if not db.is_alive():
        return JSONResponse(
            status_code=503,
            content=HealthStatus(status=STATUS_DB_UNAVAILABLE).model_dump(),
        )
    return HealthStatus(status=STATUS_OK)
