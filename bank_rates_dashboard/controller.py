import asyncio
import logging

from typing_extensions import Self

from bank_rates_dashboard.filter_state import FilterState
from bank_rates_dashboard.models import Catalogs, ChartDataset, DashboardStatus, DashboardView, FilterSelection
from bank_rates_dashboard.rate_fetcher import FetchFailure, RateFetcher
from bank_rates_dashboard.reference_data import CatalogLoadFailure, ReferenceDataLoader
from bank_rates_dashboard.series_builder import COLOR_MODES, build_dataset

logger = logging.getLogger(__name__)


class DashboardController:
    """Drives catalog loading, re-fetching on filter changes and the published dataset.

    Every selection snapshot starts a refresh tagged with a generation number.
    Only the refresh of the latest generation may commit its result, so a slow
    response for an older selection is dropped when it finally arrives. While a
    refresh is in flight the previous dataset stays published, and a failed
    refresh keeps it and only sets `error`.
    """

    loader: ReferenceDataLoader
    fetcher: RateFetcher
    filters: FilterState
    status: DashboardStatus
    catalogs: Catalogs | None
    dataset: ChartDataset | None
    error: str | None
    _generation: int
    _latest: "asyncio.Task[None] | None"
    _refreshes: set["asyncio.Task[None]"]

    def __init__(
        self: Self,
        loader: ReferenceDataLoader,
        fetcher: RateFetcher,
        filters: FilterState,
        *,
        color_mode: str = "random",
        sort_by_date: bool = True,
    ) -> None:
        if color_mode not in COLOR_MODES:
            raise ValueError(f"Unknown series color mode {color_mode!r}, expected one of {COLOR_MODES}")
        self.loader = loader
        self.fetcher = fetcher
        self.filters = filters
        self.color_mode = color_mode
        self.sort_by_date = sort_by_date
        self.status = DashboardStatus.UNINITIALIZED
        self.catalogs = None
        self.dataset = None
        self.error = None
        self._generation = 0
        self._latest = None
        self._refreshes = set()
        filters.subscribe(self._on_selection)

    @property
    def ready(self: Self) -> bool:
        return self.status in {DashboardStatus.READY, DashboardStatus.REFRESHING}

    async def start(self: Self) -> None:
        self._generation += 1
        self._latest = None
        self.status = DashboardStatus.LOADING
        self.catalogs = None
        self.dataset = None
        self.error = None
        try:
            catalogs = await self.loader.load()
        except CatalogLoadFailure as e:
            logger.error("dashboard unavailable: %s", e.message)
            self.status = DashboardStatus.ERROR
            self.error = e.message
            return
        self.catalogs = catalogs
        await self.filters.initialize_defaults(catalogs.banks, catalogs.currencies)
        await self.settle()
        if self.status is DashboardStatus.LOADING:
            self.status = DashboardStatus.READY

    async def settle(self: Self) -> None:
        """Wait for the refresh of the current selection, if one is in flight.

        Superseded refreshes are not waited for. Cancelling the caller leaves
        the refresh itself running.
        """
        while self._latest is not None and not self._latest.done():
            await asyncio.wait([self._latest])

    async def close(self: Self) -> None:
        await self.settle()
        for task in list(self._refreshes):
            task.cancel()
        await asyncio.gather(*self._refreshes, return_exceptions=True)

    def _on_selection(self: Self, selection: FilterSelection) -> None:
        if self.status in {DashboardStatus.UNINITIALIZED, DashboardStatus.ERROR}:
            return
        self._generation += 1
        self._latest = None
        if not selection.is_fetchable:
            logger.info("selection incomplete, nothing to fetch")
            if self.status is DashboardStatus.REFRESHING:
                self.status = DashboardStatus.READY
            return
        if self.status is DashboardStatus.READY:
            self.status = DashboardStatus.REFRESHING
        task = asyncio.create_task(self._refresh(self._generation, selection))
        self._latest = task
        self._refreshes.add(task)
        task.add_done_callback(self._refreshes.discard)

    def _fail(self: Self, generation: int, message: str) -> None:
        if generation != self._generation:
            logger.info("ignoring failure of a superseded fetch: %s", message)
            return
        self.error = message
        self.status = DashboardStatus.READY

    async def _refresh(self: Self, generation: int, selection: FilterSelection) -> None:
        try:
            observations = await self.fetcher.fetch(selection)
        except FetchFailure as e:
            logger.warning("rate fetch failed: %s", e.message)
            self._fail(generation, e.message)
            return
        except Exception as e:
            logger.exception("unexpected error while fetching rates")
            self._fail(generation, f"Unexpected error: {repr(e)[:64]}")
            return
        if generation != self._generation:
            logger.info("discarding rates for superseded selection (period %s)", selection.period)
            return
        if observations is not None:
            self.dataset = build_dataset(observations, color_mode=self.color_mode, sort_by_date=self.sort_by_date)
            self.error = None
        self.status = DashboardStatus.READY

    def view(self: Self) -> DashboardView:
        return DashboardView(
            status=self.status,
            error=self.error,
            selection=self.filters.selection,
            dataset=self.dataset,
            no_data=self.dataset is not None and self.dataset.is_empty,
        )
