"""
Motor de apostas da roleta (vermelho/preto) e o caso de uso de giro
"""
import logging
import math
import random
from dataclasses import dataclass
from typing import Protocol

from sqlalchemy.orm import Session

from roulette_api.core.errors import Forbidden, InsufficientFunds, InvalidArgument
from roulette_api.core.locks import balance_locks
from roulette_api.services import user_service

logger = logging.getLogger(__name__)

GREEN = "green"
RED = "red"
BLACK = "black"
CHOICES = (RED, BLACK)

MIN_NUMBER = 0
MAX_NUMBER = 36
RED_NUMBERS = frozenset({1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36})


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


# Fonte aleatória compartilhada pelo processo
default_rng = random.SystemRandom()


@dataclass(frozen=True)
class WagerOutcome:
    number: int
    color: str
    won: bool
    bet: float
    payout: float
    delta: float
    balance: float


def color_for(number: int) -> str:
    if number == 0:
        return GREEN
    return RED if number in RED_NUMBERS else BLACK


def validate_wager(bet, choice) -> float:
    """Retorna a aposta como float ou levanta InvalidArgument"""
    if isinstance(bet, bool):
        raise InvalidArgument("Invalid bet")
    try:
        amount = float(bet)
    except (TypeError, ValueError):
        raise InvalidArgument("Invalid bet")
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidArgument("Invalid bet")
    if choice not in CHOICES:
        raise InvalidArgument("Invalid choice")
    return amount


def settle_wager(bet, choice, balance: float, rng: RandomSource = default_rng) -> WagerOutcome:
    """
    Sorteia um número em [0, 36] e liquida a aposta.

    Vitória paga o dobro da aposta (delta = +bet); derrota perde a aposta
    (delta = -bet). O zero é verde e nunca coincide com a escolha.
    """
    amount = validate_wager(bet, choice)
    if amount > balance:
        raise InsufficientFunds("Insufficient balance")

    number = rng.randint(MIN_NUMBER, MAX_NUMBER)
    color = color_for(number)
    won = color == choice
    payout = amount * 2 if won else 0.0
    delta = amount if won else -amount
    return WagerOutcome(
        number=number,
        color=color,
        won=won,
        bet=amount,
        payout=payout,
        delta=delta,
        balance=user_service.round_money(balance + delta),
    )


def place_wager(db: Session, user_id: int, bet, choice, rng: RandomSource = default_rng) -> WagerOutcome:
    validate_wager(bet, choice)
    # leitura, sorteio e escrita do saldo acontecem com o lock do usuário
    with balance_locks.hold(user_id):
        user = user_service.get_user_for_update(db, user_id)
        if not user.approved:
            raise Forbidden("Account not approved by admin")
        outcome = settle_wager(bet, choice, user.balance, rng)
        user_service.apply_delta(db, user_id, outcome.delta)
    logger.debug(
        f"Giro do usuário {user_id}: número {outcome.number} ({outcome.color}), "
        f"aposta {outcome.bet} em {choice}, saldo {outcome.balance}"
    )
    return outcome
