"""
A single page of a paginated list response.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """
    One page of results. `next_page_token` is opaque and is only meaningful
    when `has_more` is true. Parameterize at the call site, e.g.
    `Page[Group].model_validate_json(content)`.
    """

    object: str = "list"
    total_count: int | None = None
    start_item: int | None = None
    end_item: int | None = None
    has_more: bool = False
    next_page_token: int | str | None = None
    data: list[T] = []
