import logging
import math
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from roulette_api.core.errors import Conflict, InternalError, NotFound
from roulette_api.core.locks import balance_locks
from roulette_api.core.security import hash_password, verify_password
from roulette_api.models import user_model
from roulette_api.schemas import user_schema

logger = logging.getLogger(__name__)


def round_money(amount: float) -> float:
    """Arredonda para centavos; meios sempre para cima (0.005 -> 0.01)"""
    return math.floor(float(amount) * 100 + 0.5) / 100


def commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Falha ao gravar no banco: {e}", exc_info=True)
        raise InternalError("Store write failed") from e


def get_user(db: Session, user_id: int) -> user_model.User:
    user = db.get(user_model.User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def get_user_for_update(db: Session, user_id: int) -> user_model.User:
    """Relê a linha do usuário com lock de escrita (quando o banco suporta)"""
    user = (
        db.query(user_model.User)
        .filter(user_model.User.id == user_id)
        .with_for_update()
        .populate_existing()
        .first()
    )
    if user is None:
        raise NotFound("User not found")
    return user


def get_user_by_username(db: Session, username: str) -> user_model.User:
    user = db.query(user_model.User).filter(user_model.User.username == username).first()
    if user is None:
        raise NotFound("User not found")
    return user


def authenticate_user(db: Session, username: str, password: str) -> Optional[user_model.User]:
    try:
        user = get_user_by_username(db, username)
    except NotFound:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def create_user(db: Session, user_in: user_schema.UserCreate) -> user_model.User:
    if db.query(user_model.User.id).filter(user_model.User.username == user_in.username).first():
        raise Conflict("Username already exists")
    db_user = user_model.User(
        username=user_in.username,
        hashed_password=hash_password(user_in.password),
        balance=0.0,
        approved=False,
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # outro request registrou o mesmo username entre a checagem e o insert
        db.rollback()
        raise Conflict("Username already exists")
    db.refresh(db_user)
    logger.info(f"Usuário '{db_user.username}' registrado (id={db_user.id})")
    return db_user


def list_users(db: Session) -> List[user_model.User]:
    return db.query(user_model.User).order_by(user_model.User.id.desc()).all()


def approve_user(db: Session, user_id: int) -> user_model.User:
    user = get_user(db, user_id)
    if not user.approved:
        user.approved = True
        commit(db)
        db.refresh(user)
        logger.info(f"Usuário {user_id} aprovado")
    return user


def set_balance(db: Session, user_id: int, amount: float) -> user_model.User:
    """Sobrescreve o saldo. Sem piso: o admin pode definir valores negativos."""
    with balance_locks.hold(user_id):
        user = get_user_for_update(db, user_id)
        user.balance = round_money(amount)
        commit(db)
        db.refresh(user)
    logger.info(f"Saldo do usuário {user_id} definido para {user.balance}")
    return user


def apply_delta(db: Session, user_id: int, delta: float) -> user_model.User:
    with balance_locks.hold(user_id):
        user = get_user_for_update(db, user_id)
        user.balance = round_money(user.balance + delta)
        commit(db)
        db.refresh(user)
    return user
