"""
Rate limiting para a API

Só as rotas que recebem senha (registro e logins) são limitadas.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from roulette_api.core.config import get_settings

settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)

login_limit = limiter.limit(settings.LOGIN_RATE_LIMIT)
