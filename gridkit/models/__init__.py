"""
Pydantic models for gridkit.

Wire shapes of remote row sources. No imports from kernel or services.
"""

from gridkit.models.paging import Pageable, PagedResponse

__all__ = ["Pageable", "PagedResponse"]
