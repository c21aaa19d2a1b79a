"""
Configuração de logging da aplicação
"""
import logging
from logging.config import dictConfig

from roulette_api.core.config import get_settings


def build_logging_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            }
        },
        "root": {
            "level": level.upper(),
            "handlers": ["console"],
        },
    }


def configure_logging() -> None:
    """Configura o logging a partir das settings"""
    settings = get_settings()
    dictConfig(build_logging_config(settings.LOG_LEVEL))
    logging.getLogger(__name__).info(
        "Logging configurado (nível %s, ambiente %s)",
        settings.LOG_LEVEL.upper(),
        settings.ENVIRONMENT,
    )
