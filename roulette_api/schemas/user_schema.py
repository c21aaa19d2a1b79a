from datetime import datetime
import math
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCredentials(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserCreate(UserCredentials):
    pass


class UserOut(BaseModel):
    id: int
    username: str
    balance: float
    approved: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserEnvelope(BaseModel):
    user: UserOut


class RegisterResponse(UserEnvelope):
    message: str


class LoginResponse(UserEnvelope):
    token: str


class Token(BaseModel):
    token: str


class UserList(BaseModel):
    users: List[UserOut]


class BalanceUpdate(BaseModel):
    balance: float = 0.0

    @field_validator("balance", mode="before")
    @classmethod
    def coerce_balance(cls, v: Any) -> float:
        """Valores ausentes, não numéricos ou não finitos viram 0"""
        if isinstance(v, str):
            v = v.strip() or 0
        try:
            amount = float(v)
        except (TypeError, ValueError):
            return 0.0
        return amount if math.isfinite(amount) else 0.0


class TokenClaims(BaseModel):
    """Payload verificado de um token bearer"""
    id: int
    username: str
    is_admin: bool = Field(False, alias="isAdmin")

    model_config = ConfigDict(populate_by_name=True)
