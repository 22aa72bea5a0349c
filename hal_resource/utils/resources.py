import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from hal_resource.models.link import HalLinks, LinkValue
from hal_resource.models.page import HalPage
from hal_resource.models.resource import HalDocument

logger = logging.getLogger(__name__)

EMBEDDED_KEY = "_embedded"
LINKS_KEY = "_links"
PAGE_KEY = "page"

# A HAL document, either decoded JSON or a validated model
Document = Union[HalDocument, Mapping[str, Any]]


def _read(container: Any, key: str, attr: Optional[str] = None) -> Any:
    """
    Read the wire member ``key`` from a mapping, or attribute ``attr``
    (defaults to ``key``) from a model. None when the container is absent.
    """
    if container is None:
        return None
    if isinstance(container, Mapping):
        return container.get(key)
    if isinstance(container, HalLinks):
        return container.get(key)
    return getattr(container, attr or key, None)


# -----------------------------------------------------------------------------
# Constructors
# -----------------------------------------------------------------------------
def create_hal_resource(
    resource: Union[Mapping[str, Any], BaseModel],
    embedded: Any = None,
    links: Any = None,
) -> Dict[str, Any]:
    """
    Merge a base record with the HAL envelope.

    ``_embedded`` and ``_links`` are only present in the result when the
    matching argument is not None. Both are stored by reference; the base
    record itself is shallow-copied (models are dumped by alias).
    """
    if isinstance(resource, BaseModel):
        res = resource.model_dump(by_alias=True)
    else:
        res = dict(resource)

    for key in (EMBEDDED_KEY, LINKS_KEY):
        if key in res:
            logger.warning("Base record carries reserved key %r, replaced by the HAL envelope", key)
            del res[key]

    if embedded is not None:
        res[EMBEDDED_KEY] = embedded
    if links is not None:
        res[LINKS_KEY] = links
    return res


def create_hal_paged_resource(
    embedded: Any,
    page: Union[HalPage, Mapping[str, Any]],
    links: Any = None,
) -> Dict[str, Any]:
    """Build one page of a collection. ``_links`` is left out when links is None."""
    res: Dict[str, Any] = {
        PAGE_KEY: page,
        EMBEDDED_KEY: embedded,
    }
    if links is not None:
        res[LINKS_KEY] = links
    return res


# -----------------------------------------------------------------------------
# Accessors
# -----------------------------------------------------------------------------
def get_hal_embedded(doc: Document) -> Any:
    """Returns embedded from an HAL document."""
    return _read(doc, EMBEDDED_KEY, "embedded")


def get_hal_links(doc: Document) -> Any:
    """Returns links from an HAL document."""
    return _read(doc, LINKS_KEY, "links")


def get_hal_link(doc: Document, rel: str) -> Optional[LinkValue]:
    """Returns the link (or list of links) stored under relation ``rel``."""
    return _read(get_hal_links(doc), rel)


def get_hal_page(doc: Document) -> Any:
    """Returns page from an HAL document."""
    return _read(doc, PAGE_KEY)


def get_hal_page_number(doc: Document) -> Optional[int]:
    """Returns page number from an HAL document."""
    return _read(get_hal_page(doc), "number")


def get_hal_page_size(doc: Document) -> Optional[int]:
    """Returns page size from an HAL document."""
    return _read(get_hal_page(doc), "size")


def get_hal_page_total_elements(doc: Document) -> Optional[int]:
    """Returns total elements from an HAL document."""
    return _read(get_hal_page(doc), "totalElements", "total_elements")


def get_hal_page_total_pages(doc: Document) -> Optional[int]:
    """Returns total pages from an HAL document."""
    return _read(get_hal_page(doc), "totalPages", "total_pages")
