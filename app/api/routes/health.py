"""Health check endpoint; the only route besides login that needs no token."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import APP_NAME, APP_VERSION, settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Report service identity and whether the database answers a trivial query."""
    return HealthResponse(
        service=APP_NAME,
        version=APP_VERSION,
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
