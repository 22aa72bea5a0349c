from .models.link import HalLink, HalLinks, HalPageLinks, LinkValue
from .models.page import HalPage
from .models.resource import HalDocument, HalPagedResource, HalResource
from .utils.resources import (
    create_hal_paged_resource,
    create_hal_resource,
    get_hal_embedded,
    get_hal_link,
    get_hal_links,
    get_hal_page,
    get_hal_page_number,
    get_hal_page_size,
    get_hal_page_total_elements,
    get_hal_page_total_pages,
)

__version__ = "0.1.0"

__all__ = [
    "HalLink",
    "HalLinks",
    "HalPageLinks",
    "LinkValue",
    "HalPage",
    "HalDocument",
    "HalResource",
    "HalPagedResource",
    "create_hal_resource",
    "create_hal_paged_resource",
    "get_hal_embedded",
    "get_hal_links",
    "get_hal_link",
    "get_hal_page",
    "get_hal_page_number",
    "get_hal_page_size",
    "get_hal_page_total_elements",
    "get_hal_page_total_pages",
]
