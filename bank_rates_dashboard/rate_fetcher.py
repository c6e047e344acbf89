import logging
from typing import Protocol

from typing_extensions import Self

from bank_rates_dashboard.models import FilterSelection, RateObservation
from bank_rates_dashboard.rate_service import RateServiceError

logger = logging.getLogger(__name__)


class RateSource(Protocol):
    async def query_rates(self, bank_ids: tuple[int, ...], currency_id: int, period: str) -> list[RateObservation]:
        ...


class FetchFailure(Exception):
    message: str

    def __init__(self: Self, message: str, *args: object) -> None:
        super().__init__(*args)
        self.message = message


class RateFetcher:
    source: RateSource

    def __init__(self: Self, source: RateSource) -> None:
        self.source = source

    async def fetch(self: Self, selection: FilterSelection) -> list[RateObservation] | None:
        # incomplete selections are skipped without a round-trip
        if not selection.is_fetchable or selection.currency_id is None:
            return None
        logger.info(
            "fetching rates for banks %s, currency %s, period %s",
            list(selection.bank_ids),
            selection.currency_id,
            selection.period,
        )
        try:
            return await self.source.query_rates(selection.bank_ids, selection.currency_id, selection.period)
        except RateServiceError as e:
            raise FetchFailure(e.message) from e
