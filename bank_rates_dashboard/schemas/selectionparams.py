from pydantic import BaseModel, Field

from bank_rates_dashboard.models.catalogs import FIRST_YEAR


class CurrencySelection(BaseModel):
    currency: int


class BankSelection(BaseModel):
    banks: list[int]


class PeriodSelection(BaseModel):
    month: int | None = Field(default=None, ge=1, le=12)
    year: int | None = Field(default=None, ge=FIRST_YEAR)
