"""
Configuração global para testes

Este arquivo é carregado automaticamente pelo pytest antes de qualquer teste.
Ele define as variáveis de ambiente ANTES de qualquer import da aplicação,
já que as settings são lidas uma única vez.
"""
import os
import tempfile
import uuid

import pytest

TEST_DB_PATH = os.path.join(tempfile.gettempdir(), f"test_roulette_{uuid.uuid4().hex}.db")

TEST_ENV_VARS = {
    "SECRET_KEY": "test_secret_key_for_testing_only",
    "DATABASE_URL": f"sqlite:///{TEST_DB_PATH}",
    "ALGORITHM": "HS256",
    "ACCESS_TOKEN_EXPIRE_MINUTES": "10080",
    "ADMIN_USERNAME": "admin",
    "ADMIN_PASSWORD": "admin123",
    "ENVIRONMENT": "testing",
    "CORS_ORIGINS": "*",
    "LOG_LEVEL": "WARNING",
    "RATE_LIMIT_ENABLED": "false",
    "LOGIN_RATE_LIMIT": "5/minute",
}

for key, value in TEST_ENV_VARS.items():
    os.environ[key] = value

from fastapi.testclient import TestClient  # noqa: E402

from roulette_api.core.database import Base, SessionLocal, engine  # noqa: E402
from roulette_api.main import app  # noqa: E402
from roulette_api.models import user_model  # noqa: E402


class ScriptedRng:
    """Fonte aleatória determinística: devolve os números na ordem dada"""

    def __init__(self, *numbers):
        self.numbers = list(numbers)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if not self.numbers:
            raise AssertionError("ScriptedRng sem números restantes")
        return self.numbers.pop(0)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Cria o schema no banco temporário e remove o arquivo no final"""
    Base.metadata.create_all(bind=engine)
    yield
    engine.dispose()
    try:
        os.unlink(TEST_DB_PATH)
    except OSError:
        pass


@pytest.fixture(scope="function", autouse=True)
def clean_users():
    """Limpa os dados entre testes (mantém as tabelas)"""
    yield
    db = SessionLocal()
    try:
        db.query(user_model.User).delete()
        db.commit()
    finally:
        db.close()


@pytest.fixture(scope="function")
def db_session():
    """Cria uma sessão de banco de dados para cada teste"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture(scope="function")
def client():
    """Cliente de teste (executa o lifespan)"""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def scripted_rng():
    return ScriptedRng
