from datetime import date

from bank_rates_dashboard import dashboard
from bank_rates_dashboard.models import Catalogs, DashboardView
from bank_rates_dashboard.schemas import SelectionOptions
from bank_rates_dashboard.services.selection_service import ready_catalogs


def dashboard_view() -> DashboardView:
    return dashboard.view()


def selection_options(today: date | None = None) -> SelectionOptions:
    catalogs = ready_catalogs()
    return SelectionOptions(
        banks=catalogs.bank_options(),
        currencies=catalogs.currency_options(),
        months=Catalogs.month_options(),
        years=Catalogs.year_options(today or date.today()),
    )
