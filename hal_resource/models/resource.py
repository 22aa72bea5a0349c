from typing import ClassVar, Generic, Optional, Tuple, TypeVar

from pydantic import ConfigDict, Field

from hal_resource.models.base import HalModel
from hal_resource.models.link import HalLinks, HalPageLinks
from hal_resource.models.page import HalPage

E = TypeVar("E")
L = TypeVar("L", bound=HalLinks)


# -----------------------------------------------------------------------------
# Document / Resource
# -----------------------------------------------------------------------------
class HalDocument(HalModel, Generic[E, L]):
    """
    The HAL envelope shared by every resource.

    A resource is a document plus the caller's own fields, declared by
    subclassing a parametrized document:

        class UserResource(HalDocument[EmbeddedRoles, UserLinks]):
            username: str

    Undeclared keys of a received document are kept as extras. The envelope
    is only populated from its wire names, ``_embedded=`` / ``_links=``; a
    base-record key spelled ``embedded`` or ``links`` stays a base-record key.
    """
    embedded: Optional[E] = Field(
        None,
        alias="_embedded",
        description="Embedded sub-resources, keyed by relation name"
    )
    links: Optional[L] = Field(
        None,
        alias="_links",
        description="Hypermedia links, keyed by relation name"
    )

    model_config = ConfigDict(extra="allow")
    omit_if_none: ClassVar[Tuple[str, ...]] = ("embedded", "links")


HalResource = HalDocument


class HalPagedResource(HalDocument[E, HalPageLinks], Generic[E]):
    """One page of a collection: items under _embedded, page metadata and navigation links"""
    page: Optional[HalPage] = Field(
        None,
        description="Pagination metadata"
    )

    omit_if_none: ClassVar[Tuple[str, ...]] = ("embedded", "links", "page")
