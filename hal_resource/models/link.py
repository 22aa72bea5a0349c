from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from pydantic import ConfigDict, Field

from hal_resource.models.base import HalModel


# -----------------------------------------------------------------------------
# Link
# -----------------------------------------------------------------------------
class HalLink(HalModel):
    """One hypermedia reference (draft-kelly-json-hal-08, section 5)"""
    href: str = Field(
        ...,
        description="URI of the target, or a URI template when templated is true",
        examples=["http://localhost/users/admin"]
    )
    deprecation: Optional[str] = Field(
        None,
        description="URL describing the deprecation of this link"
    )
    hreflang: Optional[str] = Field(
        None,
        description="Language of the target resource"
    )
    name: Optional[str] = Field(
        None,
        description="Secondary key for selecting links sharing a relation"
    )
    profile: Optional[str] = Field(
        None,
        description="URI of a profile hinting at the target resource"
    )
    templated: Optional[bool] = Field(
        None,
        description="True when href is a URI template"
    )
    title: Optional[str] = Field(
        None,
        description="Human-readable label of the link"
    )
    type: Optional[str] = Field(
        None,
        description="Expected media type of the target resource"
    )

    omit_if_none: ClassVar[Tuple[str, ...]] = (
        "deprecation", "hreflang", "name", "profile", "templated", "title", "type",
    )


LinkValue = Union[HalLink, List[HalLink]]


# -----------------------------------------------------------------------------
# Links Map
# -----------------------------------------------------------------------------
class HalLinks(HalModel):
    """
    Relation name -> link, or list of links for collection relations.

    ``self`` and ``curies`` are reserved. Any other relation is either declared
    as a field by a subclass or accepted as an extra key. Every relation is
    optional, so relations left as None never reach the dump.
    """
    self_: Optional[HalLink] = Field(
        None,
        alias="self",
        description="Canonical address of the owning document"
    )
    curies: Optional[List[HalLink]] = Field(
        None,
        description="Compact URI prefixes for the other relation names"
    )

    __pydantic_extra__: Dict[str, LinkValue] = Field(init=False)

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    omit_if_none: ClassVar[Tuple[str, ...]] = ("self_", "curies")

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.omit_if_none = tuple(cls.model_fields)

    def get(self, rel: str) -> Optional[LinkValue]:
        """Return what is stored under the wire relation name ``rel``, or None."""
        for name, field in type(self).model_fields.items():
            if rel == (field.alias or name):
                return getattr(self, name)
        return (self.model_extra or {}).get(rel)


class HalPageLinks(HalLinks):
    """Navigation relations of one page of a collection. No other relation is accepted."""
    first: Optional[HalLink] = Field(None, description="First page")
    last: Optional[HalLink] = Field(None, description="Last page")
    next: Optional[HalLink] = Field(None, description="Following page")
    prev: Optional[HalLink] = Field(None, description="Preceding page")

    model_config = ConfigDict(extra="forbid")
