from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChartJsPoint(BaseModel):
    x: str
    y: float


class ChartJsDataLabels(BaseModel):
    # indexable option, one flag per point
    display: list[bool]


class ChartJsDataset(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    label: str
    data: list[ChartJsPoint]
    border_color: str = Field(alias="borderColor")
    background_color: str = Field(alias="backgroundColor")
    datalabels: ChartJsDataLabels


class ChartJsData(BaseModel):
    labels: list[str]
    datasets: list[ChartJsDataset]


class ChartConfig(BaseModel):
    type: str = "line"
    data: ChartJsData
    options: dict[str, Any]
