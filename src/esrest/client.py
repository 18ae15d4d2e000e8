from __future__ import annotations

from typing import Any

import structlog

from esrest.codec.bulk import NDJSON_CONTENT_TYPE, encode_bulk, index_actions
from esrest.errors import ElasticSearchError, IndexAlreadyExistsError
from esrest.executor import RequestExecutor
from esrest.models import BulkSummary, HttpMethod, IndexTarget
from esrest.settings import settings as default_settings
from esrest.transport.base import Transport

logger = structlog.get_logger(__name__)


class ElasticSearch:
    """
    Async client for the Elasticsearch REST API.

    Every method performs exactly one request and returns the decoded JSON
    response. Failures raise ElasticSearchError subclasses carrying the
    decoded error body.
    """

    def __init__(self, host: str | None = None, transport: Transport | None = None) -> None:
        self._executor = RequestExecutor(host or default_settings.es_host, transport)

    @property
    def host(self) -> str:
        return self._executor.host

    async def create_index(
        self,
        name: str,
        settings: dict[str, Any] | None = None,
        throw_if_exists: bool = True,
    ) -> Any:
        """
        Create index `name` with optional `settings`, e.g.

            await es.create_index("movie-index", {
                "settings": {"number_of_shards": 3, "number_of_replicas": 2}
            })

        With throw_if_exists=False an existing index is not an error: the
        engine's conflict response is returned instead.
        """
        try:
            return await self._executor.execute(HttpMethod.PUT, name, settings or {})
        except IndexAlreadyExistsError as e:
            if not throw_if_exists:
                logger.debug("es.index_exists", index=name)
                return e.response
            raise IndexAlreadyExistsError(e.response, e.status_code, index=name) from e

    async def delete_index(self, name: str) -> Any:
        """Delete index `name`. "_all" deletes every index."""
        return await self._executor.execute(HttpMethod.DELETE, name)

    async def search(self, index: str = "_all", query: dict[str, Any] | None = None) -> Any:
        """
        Search `index` (all indices by default). Without a query everything
        matches.

            await es.search(index="movie-index", query={"query": {"match": {"name": "Fury"}}})
        """
        path = IndexTarget(index=index).search_path()
        return await self._executor.execute(HttpMethod.POST, path, query or {})

    async def put_mapping(self, mapping: dict[str, Any], index: str = "_all", type: str = "") -> Any:
        path = IndexTarget(index=index, type=type).mapping_path()
        return await self._executor.execute(HttpMethod.PUT, path, mapping)

    async def get_mapping(self, index: str = "_all", type: str = "") -> Any:
        path = IndexTarget(index=index, type=type).mapping_path()
        return await self._executor.execute(HttpMethod.GET, path)

    async def bulk(self, operations: list[dict[str, Any]], index: str = "_all", type: str = "") -> Any:
        """
        Run many index/create/update/delete operations in one call.
        `operations` alternates action descriptors and documents (delete
        actions have no document):

            await es.bulk([
                {"index": {"_index": "movie-index", "_id": "1"}},
                {"name": "Fury", "year": "2014"},
                {"delete": {"_index": "movie-index", "_id": "2"}},
            ])
        """
        path = IndexTarget(index=index, type=type).bulk_path()
        return await self._executor.execute(
            HttpMethod.POST, path, encode_bulk(operations), content_type=NDJSON_CONTENT_TYPE
        )

    async def bulk_index(self, index_name: str, docs: list[dict], id_field: str = "id") -> BulkSummary:
        """Index documents in one bulk call, using each doc's `id_field` as _id."""
        data = await self.bulk(index_actions(index_name, docs, id_field), index=index_name)
        return BulkSummary.from_response(data)

    async def info(self) -> Any:
        """Cluster name and version document served at the root path."""
        return await self._executor.execute(HttpMethod.GET, "")

    async def ping(self) -> bool:
        """
        Reachability check. Not a readiness check: any answered request with a
        success status counts.
        """
        try:
            await self.info()
        except ElasticSearchError as e:
            logger.info("es.ping_failed", host=self.host, error=str(e))
            return False
        return True
