"""
Testes para schemas e validações
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from roulette_api.models import user_model
from roulette_api.schemas import user_schema, wager_schema


class TestUserSchemas:
    """Testes para schemas de usuário"""

    def test_user_create_valid(self):
        user = user_schema.UserCreate(username="alice", password="pw1234")
        assert user.username == "alice"
        assert user.password == "pw1234"

    @pytest.mark.parametrize("data", [
        {"username": "alice"},
        {"password": "pw1234"},
        {"username": "", "password": "pw1234"},
        {"username": "alice", "password": ""},
    ])
    def test_user_create_invalid(self, data):
        with pytest.raises(ValidationError):
            user_schema.UserCreate(**data)

    def test_user_out_from_orm(self):
        user = user_model.User(
            id=1,
            username="alice",
            hashed_password="digest",
            balance=12.5,
            approved=True,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        out = user_schema.UserOut.model_validate(user)
        assert out.balance == 12.5
        assert "hashed_password" not in out.model_dump()

    def test_balance_update_coerces_to_zero(self):
        assert user_schema.BalanceUpdate().balance == 0
        assert user_schema.BalanceUpdate(balance=None).balance == 0
        assert user_schema.BalanceUpdate(balance="abc").balance == 0
        assert user_schema.BalanceUpdate(balance="").balance == 0
        assert user_schema.BalanceUpdate(balance=float("inf")).balance == 0
        assert user_schema.BalanceUpdate(balance="12.5").balance == 12.5

    def test_token_claims_alias(self):
        claims = user_schema.TokenClaims.model_validate({"id": 0, "username": "admin", "isAdmin": True})
        assert claims.is_admin is True


class TestWagerSchemas:
    def test_spin_request_coerces_numeric_string(self):
        assert wager_schema.SpinRequest(bet="10", choice="red").bet == 10.0

    def test_spin_request_rejects_nan(self):
        with pytest.raises(ValidationError):
            wager_schema.SpinRequest(bet=float("nan"), choice="red")

    def test_spin_request_missing_choice(self):
        with pytest.raises(ValidationError):
            wager_schema.SpinRequest(bet=1)
