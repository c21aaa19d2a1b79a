import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roulette_api.controllers import admin_controller, health_controller, user_controller, wager_controller
from roulette_api.core.config import get_settings
from roulette_api.core.dependencies import lifespan
from roulette_api.core.errors import register_exception_handlers
from roulette_api.core.logging import configure_logging
from roulette_api.core.rate_limit import limiter
from roulette_api.models import user_model  # noqa: F401  registra a tabela users no Base

settings = get_settings()
configure_logging()

# Cria a aplicação FastAPI com lifespan
app = FastAPI(title="Roulette API", lifespan=lifespan)
app.state.limiter = limiter
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)


# --- Endpoints ---
app.include_router(user_controller.router)
app.include_router(wager_controller.router)
app.include_router(admin_controller.router)
app.include_router(health_controller.router)


def run() -> None:
    uvicorn.run("roulette_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
