from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from roulette_api.core.dependencies import get_current_claims, get_db, get_rng
from roulette_api.schemas import wager_schema
from roulette_api.schemas.user_schema import TokenClaims
from roulette_api.services import wager_service

router = APIRouter(
    prefix="/api",
    tags=["Roleta"],
)


@router.post("/spin", response_model=wager_schema.SpinResponse)
def spin(
    spin_in: wager_schema.SpinRequest,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
    rng: wager_service.RandomSource = Depends(get_rng),
):
    """
    Aposta em vermelho ou preto. Só contas aprovadas pelo admin podem girar.
    """
    outcome = wager_service.place_wager(db, claims.id, spin_in.bet, spin_in.choice, rng)
    return {
        "result": {
            "number": outcome.number,
            "color": outcome.color,
            "won": outcome.won,
            "bet": outcome.bet,
            "payout": outcome.payout,
        },
        "balance": outcome.balance,
    }
