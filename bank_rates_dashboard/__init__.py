import contextlib
import logging
from collections.abc import AsyncGenerator

from elasticsearch import AsyncElasticsearch
from spectree import SpecTree
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware

from . import config
from .controller import DashboardController
from .filter_state import FilterState
from .rate_fetcher import RateFetcher
from .rate_service import RateServiceClient
from .reference_data import ReferenceDataLoader
from .selection_store import ElasticSelectionStore, SelectionStoreError

logger = logging.getLogger(__name__)

spec = SpecTree("starlette")
elastic = AsyncElasticsearch(str(config.ELASTICSEARCH_URL), verify_certs=False, ssl_show_warn=False)
selection_store = ElasticSelectionStore(elastic, config.SELECTION_INDEX)
rate_service = RateServiceClient(str(config.RATES_API_URL))
dashboard = DashboardController(
    ReferenceDataLoader(rate_service),
    RateFetcher(rate_service),
    FilterState(selection_store),
    color_mode=config.SERIES_COLOR_MODE,
    sort_by_date=config.SORT_OBSERVATIONS_BY_DATE,
)


@contextlib.asynccontextmanager
async def app_lifespan(app: Starlette) -> AsyncGenerator:
    try:
        await selection_store.ensure_index_exists()
    except SelectionStoreError as e:
        logger.warning("selection store unavailable, selections will not persist: %s", e.message)
    await dashboard.start()
    yield
    await dashboard.close()
    await dashboard.filters.flush()
    await rate_service.close()
    await selection_store.close()


from .api import ApiMount  # noqa: E402

app = Starlette(
    debug=config.DEBUG,
    routes=[ApiMount],
    lifespan=app_lifespan,
)

if config.DISABLE_CORS:
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"])

spec.register(app)
