from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, List, Optional, Sequence

from .exceptions import InvalidLinkError, MalformedResponseError
from .models import NavigationLink, Page

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str], Awaitable[Page]]
LinkFilter = Callable[[str], str]


def _find_next(links: Sequence[NavigationLink]) -> Optional[NavigationLink]:
    return next((link for link in links if link.rel == "next"), None)


async def aggregate(
    initial_links: Sequence[NavigationLink],
    fetch_page: PageFetcher,
    *,
    link_filter: Optional[LinkFilter] = None,
) -> List[Any]:
    """
    Follow ``next`` links starting from ``initial_links`` and return the data of
    every page after the first, in the order the pages were fetched.

    Pages are requested one at a time. Any error raised by ``fetch_page``
    propagates and whatever was accumulated so far is dropped.

    Raises:
        InvalidLinkError: a ``next`` link has no href.
        MalformedResponseError: a continuation page does not carry a list.
    """
    items: List[Any] = []
    next_link = _find_next(initial_links)
    while next_link is not None:
        if not next_link.href:
            raise InvalidLinkError("The link to the next page is invalid.")

        href = link_filter(next_link.href) if link_filter else next_link.href
        logger.debug(f"Fetching next page: {href}")
        page = await fetch_page(href)
        if not isinstance(page.data, list):
            raise MalformedResponseError("Expected a list of records on a continuation page.", url=href)

        logger.debug(f"Page found {len(page.data)} items")
        items.extend(page.data)
        next_link = _find_next(page.links)

    return items
