from pydantic import BaseModel, ConfigDict, Field

from .catalogs import FIRST_YEAR
from .selectoption import SelectOption


class FilterSelection(BaseModel):
    model_config = ConfigDict(frozen=True)

    currency: SelectOption | None = None
    banks: tuple[SelectOption, ...] = ()
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=FIRST_YEAR)

    @property
    def currency_id(self) -> int | None:
        return self.currency.value if self.currency is not None else None

    @property
    def bank_ids(self) -> tuple[int, ...]:
        return tuple(bank.value for bank in self.banks)

    @property
    def period(self) -> str:
        return f"{self.year}-{self.month:02d}"

    @property
    def is_fetchable(self) -> bool:
        return self.currency is not None and len(self.banks) > 0
