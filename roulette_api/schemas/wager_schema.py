from pydantic import BaseModel, Field


class SpinRequest(BaseModel):
    # valores > 0 e a cor são validados pelo motor de apostas
    bet: float = Field(..., allow_inf_nan=False)
    choice: str


class SpinResult(BaseModel):
    number: int
    color: str
    won: bool
    bet: float
    payout: float


class SpinResponse(BaseModel):
    result: SpinResult
    balance: float
