"""
Elasticsearch-backed search index for movies.

MovieService only relies on index_document, update_document,
delete_document and search; any object exposing those four coroutines
can stand in for this class.
"""
import logging
from typing import Any, Optional

from elasticsearch import AsyncElasticsearch

logger = logging.getLogger(__name__)

# Fields matched by free-text queries
TEXT_FIELDS = ["name", "description"]
GENRE_BOOST = 2

INDEX_MAPPINGS = {
    "properties": {
        "name": {"type": "text"},
        "description": {"type": "text"},
        "genre": {"type": "keyword"},
        "country": {"type": "keyword"},
        "release_date": {"type": "keyword"},
        "ticket_price": {"type": "float"},
        "photo_uri": {"type": "keyword", "index": False},
    }
}


def build_search_query(query: str, genre: Optional[str] = None) -> dict[str, Any]:
    """
    Build a fuzzy name/description match, boosted when the genre matches.

    The genre clause sits in ``should`` next to the text clause in
    ``must``, so Elasticsearch adds its score to the text score instead
    of multiplying it.
    """
    bool_query: dict[str, Any] = {
        "must": [
            {
                "multi_match": {
                    "query": query,
                    "fields": TEXT_FIELDS,
                    "fuzziness": "AUTO",
                }
            }
        ]
    }

    if genre:
        bool_query["should"] = [
            {"term": {"genre": {"value": genre, "boost": GENRE_BOOST}}}
        ]

    return {"bool": bool_query}


class SearchService:
    """Mirror of the movie catalog in an Elasticsearch index."""

    def __init__(self, client: AsyncElasticsearch, index: str, max_results: int = 100):
        self.client = client
        self.index = index
        # Elasticsearch returns 10 hits unless told otherwise
        self.max_results = max_results

    async def ensure_index(self) -> None:
        """Create the index with its mapping if it does not exist yet."""
        if await self.client.indices.exists(index=self.index):
            return
        await self.client.indices.create(index=self.index, mappings=INDEX_MAPPINGS)
        logger.info(f"Created search index '{self.index}'")

    async def index_document(self, doc_id: str, fields: dict[str, Any]) -> None:
        await self.client.index(index=self.index, id=doc_id, document=fields)

    async def update_document(self, doc_id: str, fields: dict[str, Any]) -> None:
        # Upsert so a document missed at creation time gets repaired
        await self.client.update(
            index=self.index,
            id=doc_id,
            doc=fields,
            doc_as_upsert=True,
        )

    async def delete_document(self, doc_id: str) -> None:
        await self.client.delete(index=self.index, id=doc_id)

    async def search(self, query: str, genre: Optional[str] = None) -> list[dict[str, Any]]:
        """
        Run a ranked search.

        Returns:
            Source documents in engine-ranked order, each with its ``id``
        """
        response = await self.client.search(
            index=self.index,
            query=build_search_query(query, genre),
            size=self.max_results,
        )
        return [
            {**hit["_source"], "id": hit["_id"]}
            for hit in response["hits"]["hits"]
        ]
