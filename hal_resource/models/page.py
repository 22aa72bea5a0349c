from __future__ import annotations
from math import ceil

from pydantic import ConfigDict, Field

from hal_resource.models.base import HalModel


# -----------------------------------------------------------------------------
# Page Metadata
# -----------------------------------------------------------------------------
class HalPage(HalModel):
    """Pagination metadata of a paged resource"""
    number: int = Field(
        ...,
        description="Index of the current page (numbering base is up to the caller)"
    )
    size: int = Field(
        ...,
        description="Items per page"
    )
    total_elements: int = Field(
        ...,
        alias="totalElements",
        description="Number of items across all pages"
    )
    total_pages: int = Field(
        ...,
        alias="totalPages",
        description="Number of pages"
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_total(cls, number: int, size: int, total_elements: int) -> HalPage:
        """Build a page whose total_pages is derived from the element count."""
        total_pages = ceil(total_elements / size) if total_elements > 0 and size > 0 else 0
        return cls(
            number=number,
            size=size,
            total_elements=total_elements,
            total_pages=total_pages,
        )
