"""Process-wide cache of derived lane metrics."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future
from typing import Callable, Iterable, Optional

from ...models.domain import LaneMetrics

logger = logging.getLogger(__name__)

LaneSnapshot = tuple[LaneMetrics, ...]


class MetricsCache:
    """Hold the classified lane list and populate it at most once per miss.

    Concurrent callers that miss the cache share a single in-flight population:
    the first caller runs the loader, the rest wait on its future. A failed
    population is not stored and is re-raised to every waiter.
    """

    def __init__(self, loader: Callable[[], Iterable[LaneMetrics]]) -> None:
        self._loader = loader
        self._lock = threading.Lock()
        self._lanes: Optional[LaneSnapshot] = None
        self._inflight: Optional[Future] = None

    @property
    def is_populated(self) -> bool:
        return self._lanes is not None

    def get_or_populate(self) -> LaneSnapshot:
        lanes = self._lanes
        if lanes is not None:
            return lanes

        with self._lock:
            if self._lanes is not None:
                return self._lanes
            future = self._inflight
            owner = future is None
            if owner:
                future = Future()
                self._inflight = future

        if not owner:
            logger.debug("Waiting on in-flight lane metrics population")
            return future.result()
        return self._populate(future)

    def _populate(self, future: Future) -> LaneSnapshot:
        started = time.perf_counter()
        logger.info("Populating lane metrics cache")
        try:
            lanes = tuple(self._loader())
        except BaseException as exc:
            with self._lock:
                if self._inflight is future:
                    self._inflight = None
            future.set_exception(exc)
            raise

        with self._lock:
            # invalidate() during the load detaches the future; keep the result out of the cache then
            if self._inflight is future:
                self._lanes = lanes
                self._inflight = None
        future.set_result(lanes)
        logger.info(f"Cached {len(lanes)} lanes in {time.perf_counter() - started:.2f}s")
        return lanes

    def invalidate(self) -> None:
        with self._lock:
            self._lanes = None
            self._inflight = None
        logger.info("Lane metrics cache invalidated")
