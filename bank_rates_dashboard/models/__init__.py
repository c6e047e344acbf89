from .catalogs import Bank, Catalogs, Currency
from .chartdataset import ChartDataset, ChartPoint, ChartSeries
from .dashboardview import DashboardStatus, DashboardView
from .filterselection import FilterSelection
from .rateobservation import RateObservation
from .selectoption import SelectOption

__all__ = [
    "Bank",
    "Catalogs",
    "ChartDataset",
    "ChartPoint",
    "ChartSeries",
    "Currency",
    "DashboardStatus",
    "DashboardView",
    "FilterSelection",
    "RateObservation",
    "SelectOption",
]
