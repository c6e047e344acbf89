import logging
from asyncio import gather
from typing import Protocol

from typing_extensions import Self

from bank_rates_dashboard.models import Bank, Catalogs, Currency
from bank_rates_dashboard.rate_service import RateServiceError

logger = logging.getLogger(__name__)


class CatalogSource(Protocol):
    async def list_banks(self) -> list[Bank]:
        ...

    async def list_currencies(self) -> list[Currency]:
        ...


class CatalogLoadFailure(Exception):
    message: str

    def __init__(self: Self, message: str, *args: object) -> None:
        super().__init__(*args)
        self.message = message


class ReferenceDataLoader:
    source: CatalogSource

    def __init__(self: Self, source: CatalogSource) -> None:
        self.source = source

    async def load(self: Self) -> Catalogs:
        try:
            banks, currencies = await gather(self.source.list_banks(), self.source.list_currencies())
        except RateServiceError as e:
            raise CatalogLoadFailure(f"Reference data unavailable: {e.message}") from e
        if not banks:
            raise CatalogLoadFailure("No banks available")
        if not currencies:
            raise CatalogLoadFailure("No currencies available")
        logger.info("loaded %d banks and %d currencies", len(banks), len(currencies))
        return Catalogs(banks=banks, currencies=currencies)
