import logging
from typing import Any, Dict, Mapping, Optional

from fastapi import Request

from hal_resource.config.settings import settings
from hal_resource.models.link import HalLink, HalPageLinks
from hal_resource.models.page import HalPage

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Link HATEOAS
# -----------------------------------------------------------------------------
def build_hal_link(
    request: Request,
    route_name: str,
    *,
    query: Optional[Mapping[str, Any]] = None,
    **path_params: Any,
) -> HalLink:
    """
    Resolve a named route into a HAL link.

    Query values that are None are skipped. An unknown route name raises
    starlette's NoMatchFound.
    """
    url = request.url_for(route_name, **path_params)
    if query:
        params = {key: value for key, value in query.items() if value is not None}
        if params:
            url = url.include_query_params(**params)

    href = str(url)
    logger.debug("Resolved route %s to %s", route_name, href)
    return HalLink(href=href)


# -----------------------------------------------------------------------------
# Page HATEOAS
# -----------------------------------------------------------------------------
def build_page_links(
    request: Request,
    route_name: str,
    page: HalPage,
    *,
    query: Optional[Mapping[str, Any]] = None,
    **path_params: Any,
) -> HalPageLinks:
    """
    Build self/first/last/next/prev links for one page of a listing route.

    prev is left out on the first page, next on the last one, and first/last
    when the collection has no pages at all.
    """
    first_page = settings.FIRST_PAGE
    last_page = first_page + page.total_pages - 1

    def page_link(number: int) -> HalLink:
        params = dict(query or {})
        params[settings.PAGE_PARAM] = number
        params[settings.SIZE_PARAM] = page.size
        return build_hal_link(request, route_name, query=params, **path_params)

    links: Dict[str, HalLink] = {"self_": page_link(page.number)}

    if page.total_pages > 0:
        links["first"] = page_link(first_page)
        links["last"] = page_link(last_page)
        if page.number > first_page:
            links["prev"] = page_link(min(page.number, last_page + 1) - 1)
        if page.number < last_page:
            links["next"] = page_link(max(page.number, first_page - 1) + 1)

    return HalPageLinks(**links)
