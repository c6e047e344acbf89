from bank_rates_dashboard import dashboard
from bank_rates_dashboard.models import Catalogs, DashboardView
from bank_rates_dashboard.schemas import BankSelection, CurrencySelection, PeriodSelection


class SelectionError(Exception):
    message: str

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(*args)
        self.message = message


def ready_catalogs() -> Catalogs:
    if not dashboard.ready or dashboard.catalogs is None:
        raise SelectionError(dashboard.error or "Dashboard is still loading")
    return dashboard.catalogs


async def select_currency(data: dict) -> DashboardView:
    params = CurrencySelection(**data)
    currency = ready_catalogs().currency(params.currency)
    if currency is None:
        raise SelectionError(f"Unknown currency {params.currency}")
    dashboard.filters.set_currency(currency.option())
    await dashboard.settle()
    return dashboard.view()


async def select_banks(data: dict) -> DashboardView:
    params = BankSelection(**data)
    catalogs = ready_catalogs()
    banks = {bank_id: catalogs.bank(bank_id) for bank_id in params.banks}
    unknown = [bank_id for bank_id, bank in banks.items() if bank is None]
    if unknown:
        raise SelectionError(f"Unknown banks {unknown}")
    dashboard.filters.set_banks([bank.option() for bank in banks.values() if bank is not None])
    await dashboard.settle()
    return dashboard.view()


async def select_period(data: dict) -> DashboardView:
    params = PeriodSelection(**data)
    ready_catalogs()
    dashboard.filters.set_period(month=params.month, year=params.year)
    await dashboard.settle()
    return dashboard.view()
