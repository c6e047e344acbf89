import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import date
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError
from typing_extensions import Self

from bank_rates_dashboard.models import Bank, Currency, FilterSelection, SelectOption
from bank_rates_dashboard.selection_store import SelectionStoreError

logger = logging.getLogger(__name__)

SELECTED_BANKS = "selectedBanks"
SELECTED_CURRENCY = "selectedCurrency"

_bank_options = TypeAdapter(list[SelectOption])
_currency_option = TypeAdapter(SelectOption)

T = TypeVar("T")

SelectionListener = Callable[[FilterSelection], None]


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None:
        ...

    async def set(self, key: str, value: str) -> None:
        ...


class FilterState:
    """Owns the current filter selection.

    Every mutation builds a new immutable `FilterSelection` and hands it to the
    subscribed listeners. Bank and currency choices are also written to the
    durable store in the background; month and year only live for the session.
    """

    store: KeyValueStore
    _selection: FilterSelection
    _listeners: list[SelectionListener]
    _writes: dict[str, "asyncio.Task[None]"]

    def __init__(self: Self, store: KeyValueStore, today: Callable[[], date] = date.today) -> None:
        self.store = store
        self._today = today
        current = today()
        self._selection = FilterSelection(month=current.month, year=current.year)
        self._listeners = []
        self._writes = {}

    @property
    def selection(self: Self) -> FilterSelection:
        return self._selection

    def subscribe(self: Self, listener: SelectionListener) -> None:
        self._listeners.append(listener)

    def _replace(self: Self, **changes: Any) -> FilterSelection:
        return FilterSelection(**(dict(self._selection) | changes))

    def _emit(self: Self, selection: FilterSelection) -> FilterSelection:
        self._selection = selection
        for listener in self._listeners:
            listener(selection)
        return selection

    def _persist(self: Self, key: str, value: bytes) -> None:
        # writes to one key are chained so the store always ends with the newest value
        previous = self._writes.get(key)
        task = asyncio.create_task(self._write(key, value.decode(), previous))
        self._writes[key] = task

        def done(task: "asyncio.Task[None]") -> None:
            if self._writes.get(key) is task:
                del self._writes[key]
            if not task.cancelled() and task.exception() is not None:
                error = task.exception()
                logger.warning("could not persist %s: %s", key, getattr(error, "message", repr(error)))

        task.add_done_callback(done)

    async def _write(self: Self, key: str, value: str, previous: "asyncio.Task[None] | None") -> None:
        if previous is not None:
            await asyncio.wait([previous])
        await self.store.set(key, value)

    async def flush(self: Self) -> None:
        await asyncio.gather(*self._writes.values(), return_exceptions=True)

    def set_currency(self: Self, currency: SelectOption) -> FilterSelection:
        selection = self._replace(currency=currency)
        self._persist(SELECTED_CURRENCY, _currency_option.dump_json(currency))
        return self._emit(selection)

    def set_banks(self: Self, banks: Sequence[SelectOption]) -> FilterSelection:
        unique = list(dict.fromkeys(banks))
        selection = self._replace(banks=tuple(unique))
        self._persist(SELECTED_BANKS, _bank_options.dump_json(unique))
        return self._emit(selection)

    def set_month(self: Self, month: int) -> FilterSelection:
        return self._emit(self._replace(month=month))

    def set_year(self: Self, year: int) -> FilterSelection:
        return self._emit(self._replace(year=year))

    def set_period(self: Self, month: int | None = None, year: int | None = None) -> FilterSelection:
        changes = {name: value for name, value in {"month": month, "year": year}.items() if value is not None}
        selection = self._replace(**changes)
        if selection == self._selection:
            return self._selection
        return self._emit(selection)

    async def _read(self: Self, key: str, adapter: TypeAdapter[T]) -> T | None:
        try:
            raw = await self.store.get(key)
        except SelectionStoreError as e:
            logger.warning("could not read %s, using defaults: %s", key, e.message)
            return None
        if raw is None:
            return None
        try:
            return adapter.validate_json(raw)
        except ValidationError:
            logger.warning("ignoring corrupt persisted value for %s", key)
            return None

    async def initialize_defaults(self: Self, banks: Sequence[Bank], currencies: Sequence[Currency]) -> FilterSelection:
        stored_banks, stored_currency = await asyncio.gather(
            self._read(SELECTED_BANKS, _bank_options),
            self._read(SELECTED_CURRENCY, _currency_option),
        )

        # persisted options are re-labelled from the catalog, unknown ids are dropped
        known_banks = {bank.id: bank for bank in banks}
        selected_banks = list(
            dict.fromkeys(known_banks[option.value].option() for option in stored_banks or [] if option.value in known_banks)
        )
        if not selected_banks and banks:
            selected_banks = [banks[0].option()]

        known_currencies = {currency.id: currency for currency in currencies}
        if stored_currency is not None and stored_currency.value in known_currencies:
            selected_currency: SelectOption | None = known_currencies[stored_currency.value].option()
        else:
            selected_currency = currencies[0].option() if currencies else None

        today = self._today()
        return self._emit(
            FilterSelection(currency=selected_currency, banks=tuple(selected_banks), month=today.month, year=today.year)
        )
