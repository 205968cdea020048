"""Paged response models for remote row sources."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Pageable(BaseModel):
    """Which slice of the collection a response holds."""

    model_config = ConfigDict(populate_by_name=True)

    page_number: int = Field(default=0, ge=0, alias="pageNumber")
    page_size: int = Field(default=0, ge=0, alias="pageSize")


class PagedResponse(BaseModel):
    """
    One page of rows as returned by a paging API:

        {"content": [...], "pageable": {"pageNumber": 0, "pageSize": 10},
         "totalElements": 42, "totalPages": 5}
    """

    model_config = ConfigDict(populate_by_name=True)

    content: list[dict[str, Any]] = Field(default_factory=list)
    pageable: Pageable = Field(default_factory=Pageable)
    total_elements: int = Field(default=0, ge=0, alias="totalElements")
    total_pages: int = Field(default=0, ge=0, alias="totalPages")
