from typing import Any

from bank_rates_dashboard import config, dashboard
from bank_rates_dashboard.models import ChartDataset
from bank_rates_dashboard.schemas import ChartConfig, ChartJsData, ChartJsDataLabels, ChartJsDataset, ChartJsPoint


def chart_options(title: str) -> dict[str, Any]:
    return {
        "maintainAspectRatio": False,
        "plugins": {
            "legend": {"position": "bottom"},
            "datalabels": {
                "color": "white",
                "backgroundColor": "black",
                "borderRadius": 10,
                "padding": 5,
                "labels": {"title": {"font": {"weight": "bold"}}, "value": {"color": "green"}},
            },
            "title": {"display": True, "text": title},
        },
        "layout": {"padding": 30},
    }


def chart_config(dataset: ChartDataset, title: str) -> ChartConfig:
    return ChartConfig(
        data=ChartJsData(
            labels=[str(day) for day in dataset.day_labels],
            datasets=[
                ChartJsDataset(
                    label=series.label,
                    data=[ChartJsPoint(x=str(point.day), y=point.rate) for point in series.points],
                    border_color=f"#{series.color_token}",
                    background_color=f"#{series.color_token}",
                    # only the last point of each line is labelled
                    datalabels=ChartJsDataLabels(
                        display=[index == len(series.points) - 1 for index in range(len(series.points))]
                    ),
                )
                for series in dataset.series
            ],
        ),
        options=chart_options(title),
    )


def current_chart() -> ChartConfig | None:
    # nothing to draw until a non-empty dataset has been committed
    if dashboard.dataset is None or dashboard.dataset.is_empty:
        return None
    return chart_config(dashboard.dataset, config.CHART_TITLE)
