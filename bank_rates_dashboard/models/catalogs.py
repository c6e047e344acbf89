from calendar import month_name
from datetime import date

from pydantic import BaseModel

from .selectoption import SelectOption

FIRST_YEAR = 2022


class Bank(BaseModel):
    id: int
    name: str

    def option(self) -> SelectOption:
        return SelectOption(value=self.id, label=self.name)


class Currency(BaseModel):
    id: int
    symbol: str

    def option(self) -> SelectOption:
        return SelectOption(value=self.id, label=self.symbol)


class Catalogs(BaseModel):
    banks: list[Bank]
    currencies: list[Currency]

    def bank_options(self) -> list[SelectOption]:
        return [bank.option() for bank in self.banks]

    def currency_options(self) -> list[SelectOption]:
        return [currency.option() for currency in self.currencies]

    def bank(self, bank_id: int) -> Bank | None:
        return next((bank for bank in self.banks if bank.id == bank_id), None)

    def currency(self, currency_id: int) -> Currency | None:
        return next((currency for currency in self.currencies if currency.id == currency_id), None)

    @staticmethod
    def month_options() -> list[SelectOption]:
        return [SelectOption(value=month, label=month_name[month]) for month in range(1, 13)]

    @staticmethod
    def year_options(today: date) -> list[SelectOption]:
        return [SelectOption(value=year, label=str(year)) for year in range(FIRST_YEAR, today.year + 1)]
