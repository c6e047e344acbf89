import hashlib
import random
from collections.abc import Callable, Sequence

from bank_rates_dashboard.models import ChartDataset, ChartPoint, ChartSeries, RateObservation

COLOR_MODES = ("random", "bank")


def random_color(_: int) -> str:
    return f"{random.getrandbits(24):06x}"


def bank_color(bank_id: int) -> str:
    return hashlib.sha1(str(bank_id).encode()).hexdigest()[:6]


def color_picker(color_mode: str) -> Callable[[int], str]:
    if color_mode == "random":
        return random_color
    if color_mode == "bank":
        return bank_color
    raise ValueError(f"Unknown series color mode {color_mode!r}, expected one of {COLOR_MODES}")


def build_dataset(
    observations: Sequence[RateObservation], *, color_mode: str = "random", sort_by_date: bool = True
) -> ChartDataset:
    """Reshape raw observations into one series per bank over a shared day axis.

    Series follow the order in which banks first appear in `observations`.
    Points keep the received order unless `sort_by_date` is set, in which case
    they are stably sorted by date. Colours are fresh random tokens on every
    build in "random" mode and derived from the bank id in "bank" mode.
    """
    color = color_picker(color_mode)

    labels: dict[int, str] = {}
    for observation in observations:
        labels.setdefault(observation.bank_id, observation.bank_name)

    ordered = sorted(observations, key=lambda o: o.date) if sort_by_date else observations
    points: dict[int, list[ChartPoint]] = {bank_id: [] for bank_id in labels}
    for observation in ordered:
        points[observation.bank_id].append(ChartPoint(day=observation.date.day, rate=observation.rate))

    return ChartDataset(
        day_labels=tuple(sorted({observation.date.day for observation in observations})),
        series=tuple(
            ChartSeries(bank_id=bank_id, label=label, points=tuple(points[bank_id]), color_token=color(bank_id))
            for bank_id, label in labels.items()
        ),
    )
