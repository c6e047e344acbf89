from enum import Enum

from pydantic import BaseModel

from .chartdataset import ChartDataset
from .filterselection import FilterSelection


class DashboardStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    REFRESHING = "refreshing"
    ERROR = "error"


class DashboardView(BaseModel):
    status: DashboardStatus
    error: str | None
    selection: FilterSelection
    dataset: ChartDataset | None
    no_data: bool
