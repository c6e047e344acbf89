from unittest.mock import AsyncMock

import pytest

from bank_rates_dashboard.models import Bank, Currency
from bank_rates_dashboard.rate_service import RateServiceError
from bank_rates_dashboard.reference_data import CatalogLoadFailure, ReferenceDataLoader


def catalog_source(banks: list[Bank], currencies: list[Currency]) -> AsyncMock:
    source = AsyncMock()
    source.list_banks.return_value = banks
    source.list_currencies.return_value = currencies
    return source


@pytest.mark.asyncio
async def test_load() -> None:
    source = catalog_source([Bank(id=1, name="X")], [Currency(id=9, symbol="USD")])

    catalogs = await ReferenceDataLoader(source).load()

    assert catalogs.banks == [Bank(id=1, name="X")]
    assert catalogs.currencies == [Currency(id=9, symbol="USD")]
    assert catalogs.bank(1) == Bank(id=1, name="X")
    assert catalogs.currency(10) is None


@pytest.mark.asyncio
async def test_load_service_error() -> None:
    source = catalog_source([], [])
    source.list_banks.side_effect = RateServiceError("GET /banks failed with status 503")

    with pytest.raises(CatalogLoadFailure) as e:
        await ReferenceDataLoader(source).load()

    assert "GET /banks failed with status 503" in e.value.message


@pytest.mark.asyncio
async def test_load_empty_catalog() -> None:
    source = catalog_source([Bank(id=1, name="X")], [])

    with pytest.raises(CatalogLoadFailure) as e:
        await ReferenceDataLoader(source).load()

    assert e.value.message == "No currencies available"
