"""
Health check da API
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.orm import Session

from roulette_api.core.config import Settings, get_settings
from roulette_api.core.dependencies import get_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Health Check"],
)


@router.get("/ping", status_code=status.HTTP_200_OK, summary="Ping")
def ping():
    return {"ok": True}


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Verifica o status da API e a conectividade com o banco de dados",
)
def health_check(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        logger.error(f"Erro ao conectar com banco de dados: {e}")
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
        "database": {"status": db_status},
    }
