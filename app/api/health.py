from fastapi import APIRouter, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check if the database is reachable."
)
def readiness_check(request: Request, response: Response):
    """
    Readiness check for the database.

    Responds with 503 when the database cannot be reached.
    """
    checks = {"database": False}

    try:
        request.app.state.db.ping()
        checks["database"] = True
    except SQLAlchemyError as e:
        checks["database_error"] = str(e)

    if not checks["database"]:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "ready" if checks["database"] else "not_ready",
        "checks": checks
    }
