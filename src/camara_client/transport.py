"""
HTTP transport used by the client.

The engine only needs ``await transport.get(url)`` returning a ``TransportResponse``;
anything implementing that protocol can be injected. ``RequestsTransport`` is the
default: a ``requests.Session`` with a politeness throttle and Retry-After aware
backoff on HTTP 429. Each attempt runs in a worker thread while every wait between
attempts is an ``asyncio.sleep``, so cancelling the caller stops further attempts
at once; the attempt already in flight is bounded by ``timeout``.
"""
from __future__ import annotations

import asyncio
import email.utils as eut
import logging
import random
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Protocol

import requests
from requests import RequestException

from .exceptions import TransportError


@dataclass
class TransportResponse:
    status_code: int
    text: str
    url: str


class Transport(Protocol):
    async def get(self, url: str) -> TransportResponse:
        ...


class RequestsTransport:
    """
    Blocking ``requests`` session exposed through an async ``get``.

    Only HTTP 429 is retried here; every other status is handed back untouched so
    the caller can map it.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = 60,
        min_interval: float = 0.1,  # politeness throttle
        max_tries: int = 5,
        backoff_base: float = 0.75,
        backoff_cap: float = 60.0,
        logger: Optional[logging.Logger] = None,
    ):
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.timeout = timeout
        self.min_interval = float(min_interval)
        self.max_tries = max(1, int(max_tries))
        self.backoff_base = float(backoff_base)
        self.backoff_cap = float(backoff_cap)
        self.logger = logger or logging.getLogger(__name__)

        self._next_slot = 0.0

    # ------------- throttling -------------
    async def _gate(self) -> None:
        if self.min_interval <= 0.0:
            return
        # reserve the slot before sleeping so concurrent callers queue up behind it
        now_m = time.monotonic()
        slot = max(now_m, self._next_slot)
        self._next_slot = slot + self.min_interval
        if slot > now_m:
            await asyncio.sleep(slot - now_m)

    # ------------- backoff helpers -------------
    @staticmethod
    def _parse_retry_after(value: str) -> float:
        """Return seconds to sleep from a Retry-After header (seconds or HTTP-date)."""
        if not value:
            return 0.0
        try:
            return float(value)
        except ValueError:
            pass
        try:
            dt = eut.parsedate_to_datetime(value)
        except (TypeError, ValueError):
            return 0.0
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return max(0.0, (dt - datetime.now(timezone.utc)).total_seconds())

    async def _sleep_backoff(self, attempt: int) -> None:
        # Full jitter: sleep in [0, min(cap, base * 2**attempt)]
        upper = min(self.backoff_cap, self.backoff_base * (2 ** attempt))
        sleep_time = random.uniform(0, upper)
        self.logger.info(f"Backoff: sleeping for {sleep_time:.2f} seconds on attempt {attempt+1} (max {self.max_tries})")
        await asyncio.sleep(sleep_time)

    def _send(self, url: str) -> requests.Response:
        try:
            return self.session.get(url, timeout=self.timeout)
        except RequestException as e:
            raise TransportError(f"{type(e).__name__}: {e}", url=url) from e

    async def get(self, url: str) -> TransportResponse:
        resp = None
        for attempt in range(self.max_tries):
            await self._gate()
            resp = await asyncio.to_thread(self._send, url)

            if resp.status_code != 429:
                break
            self.logger.warning(f"Rate limited on {url} (attempt {attempt+1}/{self.max_tries})")
            if attempt == self.max_tries - 1:
                break
            ra = self._parse_retry_after(resp.headers.get("Retry-After", ""))
            if ra > 0:
                self.logger.info(f"Sleeping for {ra:.2f} seconds.")
                await asyncio.sleep(ra)
            else:
                await self._sleep_backoff(attempt)

        return TransportResponse(status_code=resp.status_code, text=resp.text, url=url)

    def close(self) -> None:
        self.session.close()
