from pydantic import BaseModel, ConfigDict


class ChartPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int
    rate: float


class ChartSeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    bank_id: int
    label: str
    points: tuple[ChartPoint, ...]
    color_token: str

    @property
    def rates(self) -> list[float]:
        return [point.rate for point in self.points]


class ChartDataset(BaseModel):
    model_config = ConfigDict(frozen=True)

    day_labels: tuple[int, ...]
    series: tuple[ChartSeries, ...]

    @property
    def is_empty(self) -> bool:
        return not self.series

    @staticmethod
    def empty() -> "ChartDataset":
        return ChartDataset(day_labels=(), series=())
