from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String

from roulette_api.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id              = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username        = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    balance         = Column(Float, default=0.0, nullable=False)
    approved        = Column(Boolean, default=False, nullable=False)
    created_at      = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
