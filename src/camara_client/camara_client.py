#%%
from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional, Union
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from .endpoints import Endpoint
from .exceptions import (BadRequestError, MalformedResponseError,
                         NotFoundError, UnexpectedStatusError,
                         UpstreamServerError)
from .models import NavigationLink, Page, Record
from .pagination import aggregate
from .query import build_url
from .resources import (Bills, Blocs, Bodies, Events, Fronts, Legislatures,
                        Legislators, Parties, Votes)
from .transport import RequestsTransport, Transport, TransportResponse
from .utils import logger_setup
from .validators import validate_id, validate_string_id

#%%

Identifier = Union[int, str]


class CamaraAPIClient:
    """
    Typed async wrapper for the Câmara dos Deputados open-data API (v2).

    Resource collections hang off the client (``client.legislators``,
    ``client.bills``, ...). Every list operation follows the service's ``next``
    links until exhausted and returns the merged collection.
    """

    def __init__(
        self,
        base_url: str = "https://dadosabertos.camara.leg.br/api/v2",
        timeout: int = 60,
        min_interval: float = 0.1,  # politeness throttle
        max_tries: int = 5,  # attempts on HTTP 429 only
        backoff_base: float = 0.75,
        backoff_cap: float = 60.0,
        log_level: int = logging.INFO,
        transport: Optional[Transport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.logger = logger_setup(logger_name="Camara API Client", log_level=log_level)
        self.transport = transport or RequestsTransport(
            timeout=timeout,
            min_interval=min_interval,
            max_tries=max_tries,
            backoff_base=backoff_base,
            backoff_cap=backoff_cap,
            logger=self.logger,
        )

        self.blocs = Blocs(self)
        self.legislators = Legislators(self)
        self.events = Events(self)
        self.fronts = Fronts(self)
        self.legislatures = Legislatures(self)
        self.bodies = Bodies(self)
        self.parties = Parties(self)
        self.bills = Bills(self)
        self.votes = Votes(self)

    async def __aenter__(self) -> "CamaraAPIClient":
        return self

    async def __aexit__(self, *_) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    # ------------- page fetching -------------
    @staticmethod
    def _raise_for_status(resp: TransportResponse) -> None:
        status = resp.status_code
        if 200 <= status < 300:
            return
        if status == 400:
            raise BadRequestError("Bad request.", url=resp.url, status_code=status)
        if status == 404:
            raise NotFoundError("Resource not found.", url=resp.url, status_code=status)
        if status >= 500:
            raise UpstreamServerError(
                "Internal error on the Câmara dos Deputados server.", url=resp.url, status_code=status
            )
        raise UnexpectedStatusError(resp.text[:200], url=resp.url, status_code=status)

    @staticmethod
    def _parse_envelope(url: str, text: str) -> Page:
        """Parse a ``{"dados": ..., "links": [...]}`` body into a ``Page``."""
        try:
            payload = json.loads(text)
        except ValueError as e:
            raise MalformedResponseError(f"Body is not valid JSON: {e}", url=url) from e

        if not isinstance(payload, dict):
            raise MalformedResponseError("Body is not a JSON object.", url=url)
        if "dados" in payload:
            data = payload["dados"]
        elif "data" in payload:
            data = payload["data"]
        else:
            raise MalformedResponseError("Envelope has no 'dados' field.", url=url)

        raw_links = payload.get("links")
        if not isinstance(raw_links, list):
            raise MalformedResponseError("Envelope has no 'links' list.", url=url)
        links = []
        for link in raw_links:
            if not isinstance(link, dict) or "rel" not in link:
                raise MalformedResponseError(f"Invalid navigation link: {link!r}", url=url)
            links.append(NavigationLink(rel=link["rel"], href=link.get("href")))

        return Page(data=data, links=links, url=url)

    async def _fetch_page(self, url: str) -> Page:
        resp = await self.transport.get(url)
        self._raise_for_status(resp)
        return self._parse_envelope(url, resp.text)

    # ------------- url construction -------------
    @staticmethod
    def _drop_query_params(href: str, params) -> str:
        """Remove the named query parameters from ``href``."""
        if not params:
            return href
        u = urlparse(href)
        q = [(k, v) for k, v in parse_qsl(u.query, keep_blank_values=True) if k not in params]
        return urlunparse((u.scheme, u.netloc, u.path, u.params, urlencode(q, doseq=True), u.fragment))

    def _endpoint_url(self, endpoint: Endpoint, identifier: Optional[Identifier] = None) -> str:
        if "{id}" in endpoint.path:
            if endpoint.string_id:
                identifier = validate_string_id(identifier)
            else:
                identifier = str(validate_id(identifier))
            path = endpoint.path.format(id=identifier)
        else:
            path = endpoint.path

        url = f"{self.base_url}/{path}"
        if endpoint.page_size:
            url += f"?itens={endpoint.page_size}"
        return url

    # ------------- core request helpers -------------
    async def _get_many(
        self,
        endpoint: Endpoint,
        identifier: Optional[Identifier] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> List[Any]:
        url = build_url(self._endpoint_url(endpoint, identifier), options, endpoint.options)
        self.logger.debug(f"Starting pagination for: {url}")

        first = await self._fetch_page(url)
        if not isinstance(first.data, list):
            raise MalformedResponseError("Expected a list of records.", url=url)
        self.logger.debug(f"First page found {len(first.data)} items")

        link_filter = None
        if endpoint.drop_next_params:
            link_filter = lambda href: self._drop_query_params(href, endpoint.drop_next_params)

        items = list(first.data)
        items.extend(await aggregate(first.links, self._fetch_page, link_filter=link_filter))
        self.logger.debug(f"Collected {len(items)} items from {endpoint.path}")

        return [endpoint.model.from_api(it) if isinstance(it, dict) else it for it in items]

    async def _get_one(
        self,
        endpoint: Endpoint,
        identifier: Identifier,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Record:
        url = build_url(self._endpoint_url(endpoint, identifier), options, endpoint.options)
        page = await self._fetch_page(url)
        if not isinstance(page.data, dict):
            raise MalformedResponseError("Expected a single record.", url=url)
        return endpoint.model.from_api(page.data)

    async def fetch(
        self,
        endpoint: Endpoint,
        identifier: Optional[Identifier] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Union[Record, List[Any]]:
        """Run any catalog ``Endpoint``; list endpoints are fully paginated."""
        if endpoint.many:
            return await self._get_many(endpoint, identifier, options)
        return await self._get_one(endpoint, identifier, options)
