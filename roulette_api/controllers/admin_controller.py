import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from roulette_api.core.dependencies import get_current_admin, get_db, get_token_service
from roulette_api.core.errors import Unauthorized
from roulette_api.core.rate_limit import login_limit
from roulette_api.core.security import TokenService
from roulette_api.schemas import user_schema
from roulette_api.services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["Admin"],
)


@router.post("/login", response_model=user_schema.Token)
@login_limit
def admin_login(
    request: Request,
    credentials: user_schema.UserCredentials,
    tokens: TokenService = Depends(get_token_service),
):
    if not tokens.check_admin_credentials(credentials.username, credentials.password):
        logger.warning(f"Tentativa de login admin inválida para '{credentials.username}'")
        raise Unauthorized("Invalid admin credentials")
    return {"token": tokens.issue_admin_token()}


@router.get(
    "/users",
    response_model=user_schema.UserList,
    dependencies=[Depends(get_current_admin)],
)
def list_users(db: Session = Depends(get_db)):
    return {"users": user_service.list_users(db)}


@router.post(
    "/users/{user_id}/approve",
    response_model=user_schema.UserEnvelope,
    dependencies=[Depends(get_current_admin)],
)
def approve_user(user_id: int, db: Session = Depends(get_db)):
    return {"user": user_service.approve_user(db, user_id)}


@router.post(
    "/users/{user_id}/balance",
    response_model=user_schema.UserEnvelope,
    dependencies=[Depends(get_current_admin)],
)
def set_balance(
    user_id: int,
    balance_in: Optional[user_schema.BalanceUpdate] = None,
    db: Session = Depends(get_db),
):
    # sem corpo ou sem "balance" o saldo vira 0
    amount = balance_in.balance if balance_in is not None else 0.0
    return {"user": user_service.set_balance(db, user_id, amount)}
