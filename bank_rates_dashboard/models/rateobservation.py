from datetime import date

from pydantic import BaseModel, ConfigDict


class RateObservation(BaseModel):
    model_config = ConfigDict(frozen=True)

    bank_id: int
    bank_name: str
    currency_id: int
    rate: float
    date: date
