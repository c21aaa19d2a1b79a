import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from roulette_api.core import database
from roulette_api.core.config import Settings, get_settings
from roulette_api.core.database import Base, get_db
from roulette_api.core.errors import Forbidden, Unauthorized
from roulette_api.core.security import TokenService
from roulette_api.schemas.user_schema import TokenClaims
from roulette_api.services.wager_service import RandomSource, default_rng

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


# Lifespan: cria as tabelas no startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        f"Iniciando API no ambiente '{settings.ENVIRONMENT}' "
        f"(banco: {database.engine.url.get_backend_name()})"
    )
    try:
        Base.metadata.create_all(bind=database.engine)
    except Exception as e:
        logger.error(f"Erro ao criar o schema do banco: {e}", exc_info=True)
        raise
    yield
    logger.info("Encerrando API")


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService(settings)


def get_rng() -> RandomSource:
    return default_rng


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> TokenClaims:
    if credentials is None:
        raise Unauthorized("No token")
    return tokens.decode(credentials.credentials)


def get_current_admin(claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
    if not claims.is_admin:
        raise Forbidden("Admin only")
    return claims
