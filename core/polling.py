"""Cancellable polling of the invoice listing endpoint."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

import pandas as pd

from core.api_client import TransportError

logger = logging.getLogger(__name__)

__all__ = ["FEED_ERROR_MESSAGE", "InvoicePoller", "RecordFeed"]

FEED_ERROR_MESSAGE = "Unable to load invoices"


@dataclass(frozen=True)
class RecordFeed:
    """Latest known invoice list and the status of the last fetch."""

    records: tuple[dict[str, Any], ...] = ()
    status: str = "idle"
    error: Optional[str] = None
    fetched_at: Optional[pd.Timestamp] = None


class InvoicePoller:
    """Repeating fetch that can be switched on and off with the view.

    Every poll captures the current generation before fetching; a result is
    applied only if the generation is unchanged when the fetch returns, so a
    view deactivated (or re-activated) mid-fetch never sees stale data.
    """

    def __init__(
        self,
        fetch: Callable[[], list[dict[str, Any]]],
        interval_seconds: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fetch = fetch
        self._interval = float(interval_seconds)
        self._clock = clock
        self._generation = 0
        self._active = False
        self._last_polled: Optional[float] = None
        self.feed = RecordFeed()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def active(self) -> bool:
        return self._active

    @property
    def interval_seconds(self) -> float:
        return self._interval

    def activate(self) -> None:
        if self._active:
            return
        self._generation += 1
        self._active = True
        self._last_polled = None
        logger.debug("Invoice polling activated (generation %s)", self._generation)

    def deactivate(self) -> None:
        self._generation += 1
        self._active = False
        logger.debug("Invoice polling deactivated (generation %s)", self._generation)

    def is_due(self) -> bool:
        if not self._active:
            return False
        if self._last_polled is None:
            return True
        return self._clock() - self._last_polled >= self._interval

    def poll(self) -> RecordFeed:
        """Fetch once and apply the result if this poll is still current."""

        if not self._active:
            return self.feed

        token = self._generation
        self._last_polled = self._clock()
        if self.feed.status == "idle":
            self.feed = replace(self.feed, status="loading")

        try:
            records = self._fetch()
        except TransportError as exc:
            logger.error("Invoice refresh failed: %s", exc)
            if token == self._generation:
                self.feed = replace(self.feed, status="error", error=FEED_ERROR_MESSAGE)
            return self.feed

        if token != self._generation:
            logger.debug("Discarding invoice refresh from generation %s", token)
            return self.feed

        self.feed = RecordFeed(
            records=tuple(records),
            status="success",
            error=None,
            fetched_at=pd.Timestamp.now(),
        )
        return self.feed

    def poll_if_due(self) -> RecordFeed:
        if self.is_due():
            return self.poll()
        return self.feed
