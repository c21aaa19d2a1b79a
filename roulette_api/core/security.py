"""
Senhas (passlib/bcrypt) e tokens JWT (python-jose)
"""
import hmac
import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError

from roulette_api.core.config import Settings
from roulette_api.core.errors import Unauthorized
from roulette_api.models import user_model
from roulette_api.schemas.user_schema import TokenClaims

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ADMIN_ID = 0


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class TokenService:
    """
    Emite e valida os tokens de sessão.

    Recebe as settings já construídas; não lê nada do ambiente por conta própria.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def expires_delta(self) -> timedelta:
        return timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    def _sign(self, user_id: int, username: str, is_admin: bool) -> str:
        claims = {
            "id": user_id,
            "username": username,
            "isAdmin": is_admin,
            "exp": datetime.now(timezone.utc) + self.expires_delta,
        }
        return jwt.encode(claims, self.settings.SECRET_KEY, algorithm=self.settings.ALGORITHM)

    def issue_user_token(self, user: user_model.User) -> str:
        return self._sign(user.id, user.username, False)

    def issue_admin_token(self) -> str:
        return self._sign(ADMIN_ID, self.settings.ADMIN_USERNAME, True)

    def check_admin_credentials(self, username: str, password: str) -> bool:
        """Compara com o par configurado (texto puro, uso de demonstração)"""
        username_ok = hmac.compare_digest(username.encode(), self.settings.ADMIN_USERNAME.encode())
        password_ok = hmac.compare_digest(password.encode(), self.settings.ADMIN_PASSWORD.encode())
        return username_ok and password_ok

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(token, self.settings.SECRET_KEY, algorithms=[self.settings.ALGORITHM])
        except JWTError as e:
            logger.debug(f"Token rejeitado: {e}")
            raise Unauthorized("Invalid token")
        if "exp" not in payload:
            raise Unauthorized("Invalid token")
        try:
            return TokenClaims.model_validate(payload)
        except PydanticValidationError:
            raise Unauthorized("Invalid token")
