import logging
from datetime import datetime, timezone

from elasticsearch import ApiError, AsyncElasticsearch, NotFoundError, TransportError
from typing_extensions import Self

logger = logging.getLogger(__name__)


class SelectionStoreError(Exception):
    message: str

    def __init__(self: Self, message: str, *args: object) -> None:
        super().__init__(*args)
        self.message = message


class ElasticSelectionStore:
    elastic: AsyncElasticsearch
    index_name: str

    def __init__(self: Self, elastic: AsyncElasticsearch, index_name: str = "rates-dashboard-selection") -> None:
        self.elastic = elastic
        self.index_name = index_name

    async def close(self: Self) -> None:
        await self.elastic.close()

    async def ensure_index_exists(self: Self) -> None:
        try:
            if await self.elastic.indices.exists(index=self.index_name):
                return
            logger.info("creating index %s", self.index_name)
            await self.elastic.indices.create(
                index=self.index_name,
                mappings={
                    "properties": {
                        "value": {"type": "text", "index": False},
                        "updated_at": {"type": "date"},
                    }
                },
            )
        except (ApiError, TransportError) as e:
            raise SelectionStoreError(f"Could not prepare index {self.index_name}: {repr(e)[:64]}") from e

    async def get(self: Self, key: str) -> str | None:
        try:
            response = await self.elastic.get(index=self.index_name, id=key)
        except NotFoundError:
            return None
        except (ApiError, TransportError) as e:
            raise SelectionStoreError(f"Could not read {key}: {repr(e)[:64]}") from e
        return response["_source"].get("value")

    async def set(self: Self, key: str, value: str) -> None:
        try:
            await self.elastic.index(
                index=self.index_name,
                id=key,
                document={"value": value, "updated_at": datetime.now(timezone.utc).isoformat()},
            )
        except (ApiError, TransportError) as e:
            raise SelectionStoreError(f"Could not write {key}: {repr(e)[:64]}") from e
