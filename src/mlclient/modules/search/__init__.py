"""Search module - search requests, responses, source filtering and delete acknowledgements."""

from .schemas import (
    DeleteResponse,
    FetchSourceContext,
    SearchHit,
    SearchHits,
    SearchRequest,
    SearchResponse,
    SearchSourceBuilder,
)

__all__ = [
    "DeleteResponse",
    "FetchSourceContext",
    "SearchHit",
    "SearchHits",
    "SearchRequest",
    "SearchResponse",
    "SearchSourceBuilder",
]
