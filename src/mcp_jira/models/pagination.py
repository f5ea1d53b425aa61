"""Uniform pagination envelope for list results."""

import logging
from typing import Any

from pydantic import ConfigDict, Field

from .base import ApiModel

logger = logging.getLogger("mcp-jira.models.pagination")


class PaginatedResponse(ApiModel):
    """
    A page of vendor items in the shape every list tool returns:
    ``{items, count, total, startAt, maxResults, hasMore}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    items: list[Any] = Field(default_factory=list)
    count: int = 0
    total: int | None = None
    start_at: int = Field(default=0, alias="startAt")
    max_results: int = Field(default=0, alias="maxResults")
    has_more: bool = Field(default=False, alias="hasMore")

    @classmethod
    def from_api_response(
        cls,
        data: dict[str, Any],
        items_key: str = "values",
        start_at: int = 0,
        max_results: int | None = None,
        **kwargs: Any,
    ) -> "PaginatedResponse":
        """
        Build the envelope from a paged Jira response.

        Args:
            data: Vendor response such as ``{startAt, maxResults, total, values}``
            items_key: Key holding the items (values, issues, comments, ...)
            start_at: Requested offset, used when the response omits startAt
            max_results: Requested page size, used when the response omits maxResults

        Returns:
            PaginatedResponse where hasMore is ``startAt + len(items) < total``.
            Agile responses without a total fall back to ``not isLast``.
        """
        data = data or {}
        items = data.get(items_key) or []
        page_start = data.get("startAt", start_at)
        page_size = data.get("maxResults")
        if page_size is None:
            page_size = max_results if max_results is not None else len(items)
        total = data.get("total")

        if total is not None:
            has_more = page_start + len(items) < total
        elif "isLast" in data:
            has_more = not data["isLast"]
        else:
            has_more = False

        logger.debug(
            f"Paged '{items_key}': startAt={page_start}, count={len(items)}, "
            f"total={total}, hasMore={has_more}"
        )
        return cls(
            items=items,
            count=len(items),
            total=total,
            start_at=page_start,
            max_results=page_size,
            has_more=has_more,
        )

    @classmethod
    def from_list(
        cls, items: list[Any] | None, start_at: int, max_results: int | None
    ) -> "PaginatedResponse":
        """
        Build the envelope for endpoints returning a bare array.

        Without a total, a full page is taken to mean more results exist.
        """
        items = items or []
        return cls(
            items=items,
            count=len(items),
            start_at=start_at,
            max_results=max_results if max_results is not None else len(items),
            has_more=max_results is not None and len(items) == max_results,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"items": self.items, "count": self.count}
        if self.total is not None:
            result["total"] = self.total
        result["startAt"] = self.start_at
        result["maxResults"] = self.max_results
        result["hasMore"] = self.has_more
        return result
