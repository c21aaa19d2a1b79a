import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from roulette_api.core.dependencies import get_current_claims, get_db, get_token_service
from roulette_api.core.errors import Unauthorized
from roulette_api.core.rate_limit import login_limit
from roulette_api.core.security import TokenService
from roulette_api.schemas import user_schema
from roulette_api.services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Usuários"],
)

PENDING_APPROVAL_MESSAGE = "Registered. Wait for admin approval to receive balance."


@router.post("/register", response_model=user_schema.RegisterResponse)
@login_limit
def register(
    request: Request,
    user_in: user_schema.UserCreate,
    db: Session = Depends(get_db),
):
    user = user_service.create_user(db, user_in)
    return {"user": user, "message": PENDING_APPROVAL_MESSAGE}


@router.post("/login", response_model=user_schema.LoginResponse)
@login_limit
def login(
    request: Request,
    credentials: user_schema.UserCredentials,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    user = user_service.authenticate_user(db, credentials.username, credentials.password)
    if not user:
        logger.info(f"Login inválido para '{credentials.username}'")
        raise Unauthorized("Invalid credentials")
    return {"user": user, "token": tokens.issue_user_token(user)}


@router.get("/me", response_model=user_schema.UserEnvelope)
def read_me(
    claims: user_schema.TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    return {"user": user_service.get_user(db, claims.id)}
