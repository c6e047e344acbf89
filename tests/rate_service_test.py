# ruff: noqa: PLR2004

from datetime import date
from typing import Any
from unittest.mock import patch

import pytest
from aiohttp import test_utils, web

from bank_rates_dashboard.models import Bank, Currency, RateObservation
from bank_rates_dashboard.rate_service import RateServiceClient, RateServiceError


def rates_app(received: list[Any], records: Any) -> web.Application:
    async def banks(_: web.Request) -> web.Response:
        return web.json_response([{"id": 1, "name": "X"}, {"id": 2, "name": "Y"}])

    async def currencies(_: web.Request) -> web.Response:
        return web.json_response([{"id": 9, "symbol": "USD"}])

    async def rates(request: web.Request) -> web.Response:
        received.append(await request.json())
        return web.json_response(records)

    app = web.Application()
    app.router.add_get("/banks", banks)
    app.router.add_get("/currencies", currencies)
    app.router.add_post("/rates", rates)
    return app


@pytest.mark.asyncio
async def test_catalogs() -> None:
    async with test_utils.TestServer(rates_app([], [])) as server:
        client = RateServiceClient(str(server.make_url("/")))
        try:
            assert await client.list_banks() == [Bank(id=1, name="X"), Bank(id=2, name="Y")]
            assert await client.list_currencies() == [Currency(id=9, symbol="USD")]
        finally:
            await client.close()


@pytest.mark.asyncio
async def test_query_rates() -> None:
    received: list[Any] = []
    records = [
        {"bank": {"id": 2, "name": "Y"}, "rate": 305.5, "date": "2024-03-02T00:00:00.000Z"},
        {"bank": {"id": 1, "name": "X"}, "currency": {"id": 9}, "rate": 300, "date": "2024-03-01"},
    ]
    async with test_utils.TestServer(rates_app(received, records)) as server:
        client = RateServiceClient(str(server.make_url("/")))
        try:
            observations = await client.query_rates((1, 2), 9, "2024-03")
        finally:
            await client.close()

    assert received == [{"bankIds": [1, 2], "currencyId": 9, "date": "2024-03-01"}]
    assert observations == [
        RateObservation(bank_id=2, bank_name="Y", currency_id=9, rate=305.5, date=date(2024, 3, 2)),
        RateObservation(bank_id=1, bank_name="X", currency_id=9, rate=300, date=date(2024, 3, 1)),
    ]


@pytest.mark.asyncio
async def test_query_rates_malformed_record() -> None:
    async with test_utils.TestServer(rates_app([], [{"bank": "X", "rate": 300, "date": "2024-03-01"}])) as server:
        client = RateServiceClient(str(server.make_url("/")))
        try:
            with pytest.raises(RateServiceError) as e:
                await client.query_rates((1,), 9, "2024-03")
        finally:
            await client.close()

    assert e.value.message.startswith("Malformed rate record")


@pytest.mark.asyncio
async def test_server_error() -> None:
    async def broken(_: web.Request) -> web.Response:
        return web.Response(status=500, text="boom")

    app = web.Application()
    app.router.add_get("/banks", broken)
    async with test_utils.TestServer(app) as server:
        client = RateServiceClient(str(server.make_url("/")))
        try:
            with pytest.raises(RateServiceError) as e:
                await client.list_banks()
        finally:
            await client.close()

    assert e.value.message == "GET /banks failed with status 500"


@pytest.mark.asyncio
async def test_unreachable_service() -> None:
    client = RateServiceClient("http://127.0.0.1:1")
    try:
        with pytest.raises(RateServiceError) as e:
            await client.list_currencies()
    finally:
        await client.close()

    assert e.value.message.startswith("GET /currencies failed")


@pytest.mark.asyncio
async def test_malformed_catalog() -> None:
    client = RateServiceClient("http://rates.invalid")
    with patch.object(client, "_request_json", return_value=[{"id": "one"}]):
        with pytest.raises(RateServiceError) as e:
            await client.list_banks()

    assert e.value.message == "Malformed bank catalog"


@pytest.mark.asyncio
async def test_rates_not_a_list() -> None:
    client = RateServiceClient("http://rates.invalid")
    with patch.object(client, "_request_json", return_value={"error": "nope"}):
        with pytest.raises(RateServiceError) as e:
            await client.query_rates((1,), 9, "2024-03")

    assert e.value.message == "Malformed rate list"
