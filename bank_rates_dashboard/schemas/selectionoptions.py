from pydantic import BaseModel

from bank_rates_dashboard.models import SelectOption


class SelectionOptions(BaseModel):
    banks: list[SelectOption]
    currencies: list[SelectOption]
    months: list[SelectOption]
    years: list[SelectOption]
