import asyncio
import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

import aiohttp
from pydantic import TypeAdapter, ValidationError
from typing_extensions import Self

from bank_rates_dashboard.models import Bank, Currency, RateObservation

logger = logging.getLogger(__name__)

_banks = TypeAdapter(list[Bank])
_currencies = TypeAdapter(list[Currency])


class RateServiceError(Exception):
    message: str

    def __init__(self: Self, message: str, *args: object) -> None:
        super().__init__(*args)
        self.message = message


def _observation(record: Any, currency_id: int) -> RateObservation:
    currency = record.get("currency") or {}
    return RateObservation(
        bank_id=record["bank"]["id"],
        bank_name=record["bank"]["name"],
        currency_id=currency.get("id", currency_id),
        rate=record["rate"],
        # the service may send full timestamps, only the calendar date is plotted
        date=date.fromisoformat(str(record["date"])[:10]),
    )


class RateServiceClient:
    base_url: str
    _session: aiohttp.ClientSession | None

    def __init__(self: Self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")
        self._session = None

    def _get_session(self: Self) -> aiohttp.ClientSession:
        # created lazily so the session binds to the running loop
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self: Self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def _request_json(self: Self, method: str, path: str, payload: dict[str, Any] | None = None) -> Any:
        try:
            async with self._get_session().request(method, self.base_url + path, json=payload) as response:
                response.raise_for_status()
                return await response.json()
        except aiohttp.ContentTypeError as e:
            raise RateServiceError(f"{method} {path} returned a non-JSON response") from e
        except aiohttp.ClientResponseError as e:
            raise RateServiceError(f"{method} {path} failed with status {e.status}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RateServiceError(f"{method} {path} failed: {repr(e)[:64]}") from e
        except ValueError as e:
            raise RateServiceError(f"{method} {path} returned invalid JSON") from e

    async def list_banks(self: Self) -> list[Bank]:
        data = await self._request_json("GET", "/banks")
        try:
            return _banks.validate_python(data)
        except ValidationError as e:
            raise RateServiceError("Malformed bank catalog") from e

    async def list_currencies(self: Self) -> list[Currency]:
        data = await self._request_json("GET", "/currencies")
        try:
            return _currencies.validate_python(data)
        except ValidationError as e:
            raise RateServiceError("Malformed currency catalog") from e

    async def query_rates(self: Self, bank_ids: Iterable[int], currency_id: int, period: str) -> list[RateObservation]:
        payload = {
            "bankIds": list(bank_ids),
            "currencyId": currency_id,
            # the service expects the first day of the month
            "date": f"{period}-01",
        }
        data = await self._request_json("POST", "/rates", payload)
        if not isinstance(data, list):
            raise RateServiceError("Malformed rate list")
        try:
            observations = [_observation(record, currency_id) for record in data]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise RateServiceError(f"Malformed rate record: {repr(e)[:64]}") from e
        logger.debug("received %d observations for period %s", len(observations), period)
        return observations
