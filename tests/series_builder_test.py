# ruff: noqa: PLR2004

import re
from datetime import date

import pytest

from bank_rates_dashboard.models import ChartDataset, RateObservation
from bank_rates_dashboard.series_builder import bank_color, build_dataset


def observation(bank_id: int, bank_name: str, day: str, rate: float) -> RateObservation:
    return RateObservation(
        bank_id=bank_id, bank_name=bank_name, currency_id=9, rate=rate, date=date.fromisoformat(day)
    )


@pytest.fixture(scope="module")
def observations() -> list[RateObservation]:
    return [
        observation(1, "A", "2024-03-01", 300),
        observation(1, "A", "2024-03-02", 301),
        observation(2, "B", "2024-03-01", 305),
    ]


def test_groups_by_bank(observations: list[RateObservation]) -> None:
    dataset = build_dataset(observations)

    assert dataset.day_labels == (1, 2)
    assert [series.label for series in dataset.series] == ["A", "B"]
    assert [series.rates for series in dataset.series] == [[300, 301], [305]]
    assert [point.day for point in dataset.series[0].points] == [1, 2]


def test_empty_observations() -> None:
    dataset = build_dataset([])

    assert dataset.day_labels == ()
    assert dataset.series == ()
    assert dataset.is_empty
    assert dataset == ChartDataset.empty()


def test_every_bank_gets_exactly_one_series() -> None:
    observations = [
        observation(3, "C", "2024-03-05", 1.5),
        observation(1, "A", "2024-03-05", 1.1),
        observation(3, "C", "2024-03-06", 1.6),
        observation(2, "B", "2024-03-07", 1.2),
    ]

    dataset = build_dataset(observations)

    assert [series.bank_id for series in dataset.series] == [3, 1, 2]


def test_rebuild_gives_same_labels_and_points(observations: list[RateObservation]) -> None:
    first = build_dataset(observations)
    second = build_dataset(observations)

    assert first.day_labels == second.day_labels
    assert [series.points for series in first.series] == [series.points for series in second.series]


def test_banks_sharing_a_name_are_not_merged() -> None:
    observations = [
        observation(1, "People's Bank", "2024-03-01", 300),
        observation(2, "People's Bank", "2024-03-01", 302),
    ]

    dataset = build_dataset(observations)

    assert len(dataset.series) == 2
    assert [series.rates for series in dataset.series] == [[300], [302]]


def test_duplicate_days_collapse_into_one_label() -> None:
    observations = [
        observation(1, "A", "2024-03-10", 300),
        observation(2, "B", "2024-03-10", 301),
        observation(2, "B", "2024-03-03", 302),
    ]

    assert build_dataset(observations).day_labels == (3, 10)


def test_points_sorted_by_date() -> None:
    observations = [
        observation(1, "A", "2024-03-03", 303),
        observation(1, "A", "2024-03-01", 301),
        observation(1, "A", "2024-03-02", 302),
    ]

    sorted_series = build_dataset(observations).series[0]
    received_series = build_dataset(observations, sort_by_date=False).series[0]

    assert sorted_series.rates == [301, 302, 303]
    assert received_series.rates == [303, 301, 302]


def test_series_order_follows_input_when_sorting() -> None:
    # B is received first even though A has the earlier observation
    observations = [
        observation(2, "B", "2024-03-05", 305),
        observation(1, "A", "2024-03-01", 300),
    ]

    dataset = build_dataset(observations)

    assert [series.label for series in dataset.series] == ["B", "A"]


def test_random_color_tokens(observations: list[RateObservation]) -> None:
    dataset = build_dataset(observations)

    for series in dataset.series:
        assert re.fullmatch(r"[0-9a-f]{6}", series.color_token)


def test_bank_color_tokens_are_stable(observations: list[RateObservation]) -> None:
    first = build_dataset(observations, color_mode="bank")
    second = build_dataset(observations, color_mode="bank")

    assert [series.color_token for series in first.series] == [series.color_token for series in second.series]
    assert first.series[0].color_token == bank_color(1)
    assert re.fullmatch(r"[0-9a-f]{6}", bank_color(1))


def test_unknown_color_mode(observations: list[RateObservation]) -> None:
    with pytest.raises(ValueError):
        build_dataset(observations, color_mode="rainbow")
