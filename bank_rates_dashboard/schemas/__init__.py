from .chartconfig import ChartConfig, ChartJsData, ChartJsDataLabels, ChartJsDataset, ChartJsPoint
from .errorresponse import ErrorResponse
from .selectionoptions import SelectionOptions
from .selectionparams import BankSelection, CurrencySelection, PeriodSelection

__all__ = [
    "BankSelection",
    "ChartConfig",
    "ChartJsData",
    "ChartJsDataLabels",
    "ChartJsDataset",
    "ChartJsPoint",
    "CurrencySelection",
    "ErrorResponse",
    "PeriodSelection",
    "SelectionOptions",
]
