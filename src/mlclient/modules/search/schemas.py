"""Search request, response and source filtering schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mlclient.core.action import ActionRequest, ActionResponse
from mlclient.core.exceptions import InvalidArgumentError


class FetchSourceContext(BaseModel):
    """Which document source fields a search returns."""

    fetch_source: bool = Field(default=True, description="Whether to return the document source at all")
    includes: list[str] = Field(default_factory=list, description="Fields to include, empty means all")
    excludes: list[str] = Field(default_factory=list, description="Fields to exclude")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, value: Any) -> FetchSourceContext | None:
        """Parse the "_source" element of a search body.

        Accepts a bool, a field name, a list of field names, or an object with
        "includes"/"excludes".
        """
        if value is None:
            return None
        if isinstance(value, bool):
            return cls(fetch_source=value)
        if isinstance(value, str):
            return cls(includes=[value])
        if isinstance(value, list):
            return cls(includes=[str(item) for item in value])
        if isinstance(value, dict):
            return cls(includes=_as_list(value.get("includes")), excludes=_as_list(value.get("excludes")))
        raise InvalidArgumentError(f"Unsupported _source value: {value!r}")

    def to_source(self) -> bool | dict[str, list[str]]:
        """Render as the "_source" element of a search body."""
        if not self.fetch_source:
            return False
        return {"includes": list(self.includes), "excludes": list(self.excludes)}


def _as_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value]


class SearchSourceBuilder(BaseModel):
    """Body of a search request."""

    query: dict[str, Any] | None = Field(default=None, description="Query DSL")
    size: int | None = Field(default=None, ge=0, description="Maximum number of hits")
    from_: int | None = Field(default=None, alias="from", ge=0, description="Offset of the first hit")
    sort: list[Any] | None = Field(default=None, description="Sort clauses")
    fetch_source: FetchSourceContext | None = Field(default=None, description="Source filtering")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def parse(cls, body: dict[str, Any] | None) -> SearchSourceBuilder:
        """Parse a search body as sent over REST."""
        body = dict(body or {})
        source = FetchSourceContext.parse(body.pop("_source", None))
        return cls.model_validate({**body, "fetch_source": source})

    def to_body(self) -> dict[str, Any]:
        """Render as a search body."""
        body = self.model_dump(by_alias=True, exclude_none=True, exclude={"fetch_source"})
        if self.fetch_source is not None:
            body["_source"] = self.fetch_source.to_source()
        return body


class SearchRequest(ActionRequest):
    """Search over one or more indices."""

    indices: list[str] = Field(default_factory=list, description="Indices to search")
    source: SearchSourceBuilder = Field(default_factory=SearchSourceBuilder, description="Search body")


class SearchHit(BaseModel):
    """A single search hit."""

    id: str = Field(alias="_id")
    index: str | None = Field(default=None, alias="_index")
    score: float | None = Field(default=None, alias="_score")
    source: dict[str, Any] | None = Field(default=None, alias="_source")

    model_config = ConfigDict(populate_by_name=True)


class SearchHits(BaseModel):
    """Hits section of a search response."""

    total: int = Field(default=0, description="Total number of matching documents")
    max_score: float | None = None
    hits: list[SearchHit] = Field(default_factory=list)


class SearchResponse(ActionResponse):
    """Result of a search."""

    took: int = Field(default=0, description="Execution time in milliseconds")
    timed_out: bool = False
    hits: SearchHits = Field(default_factory=SearchHits)


class DeleteResponse(ActionResponse):
    """Acknowledgement of a document deletion."""

    index: str | None = Field(default=None, alias="_index")
    id: str = Field(alias="_id")
    result: str = Field(default="deleted", description="deleted or not_found")
