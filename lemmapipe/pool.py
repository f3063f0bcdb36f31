"""
Bounded pools of non-reentrant backend engines.

Snowball stemmers and Hunspell spell-checkers keep internal state and must not be
used by two threads at once. A BackendPool owns a fixed number of slots; every slot
privately owns the engines it creates and is lent to exactly one caller at a time.
Callers only ever see the synchronous ``process(request) -> result`` operation, never
the engines themselves.
"""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, TypeVar

from .errors import PoolClosedError

logger = logging.getLogger(__name__)

Engine = TypeVar("Engine")

EngineFactory = Callable[[str], Any]
WorkFunction = Callable[[Any, "FallbackRequest"], str]


@dataclass(frozen=True)
class FallbackRequest:
    """One unit of work for a pool: the engine language and the word to process."""
    language: str
    word: str


class _Slot(Generic[Engine]):
    """A pool slot and the engines it owns, keyed by language."""

    def __init__(self, index: int, factory: Callable[[str], Engine]):
        self.index = index
        self._factory = factory
        self._engines: Dict[str, Engine] = {}

    def engine_for(self, language: str) -> Engine:
        engine = self._engines.get(language)
        if engine is None:
            logger.debug("Slot %d: creating engine for language '%s'", self.index, language)
            engine = self._factory(language)
            self._engines[language] = engine
        return engine

    def release(self) -> None:
        for language, engine in self._engines.items():
            close = getattr(engine, "close", None)
            if callable(close):
                try:
                    close()
                except Exception as exc:
                    logger.warning("Slot %d: closing '%s' engine failed: %s", self.index, language, exc)
        self._engines.clear()


class BackendPool:
    """
    Fixed-size pool of engine slots with blocking request/response dispatch.

    Args:
        factory: Builds an engine for a language; called lazily inside a slot
        work: Computes the result for one request on the engine lent to it
        size: Number of slots (>= 1). With size 1 every request is fully serialized.
        name: Label used in log messages
    """

    def __init__(
        self,
        factory: EngineFactory,
        work: WorkFunction,
        size: int = 1,
        *,
        name: str = "backend",
    ):
        if size < 1:
            raise ValueError(f"Pool size must be at least 1, got {size}")
        self.name = name
        self._factory = factory
        self._work = work
        self._lock = threading.Lock()
        self._closed = False
        self._started = False
        self._slots: List[_Slot] = []
        self._idle: "queue.Queue[_Slot]" = queue.Queue()
        self._fill(size)

    def _fill(self, size: int) -> None:
        self._slots = [_Slot(index, self._factory) for index in range(size)]
        self._idle = queue.Queue()
        for slot in self._slots:
            self._idle.put(slot)
        logger.debug("Pool '%s' sized to %d slot(s)", self.name, size)

    @property
    def size(self) -> int:
        return len(self._slots)

    @property
    def closed(self) -> bool:
        return self._closed

    def resize(self, size: int) -> None:
        """Change the number of slots. Only allowed before the first request."""
        if size < 1:
            raise ValueError(f"Pool size must be at least 1, got {size}")
        with self._lock:
            if self._closed:
                raise PoolClosedError(f"Pool '{self.name}' is closed")
            if self._started:
                raise RuntimeError(f"Pool '{self.name}' cannot be resized after work has started")
            self._fill(size)

    def process(self, request: FallbackRequest) -> str:
        """Run one request on a free slot, blocking until a slot is available."""
        with self._lock:
            if self._closed:
                raise PoolClosedError(f"Pool '{self.name}' is closed")
            self._started = True
            idle = self._idle
        slot = idle.get()
        try:
            if self._closed:
                raise PoolClosedError(f"Pool '{self.name}' is closed")
            engine = slot.engine_for(request.language)
            return self._work(engine, request)
        finally:
            idle.put(slot)

    def close(self) -> None:
        """Release every engine owned by the pool. Safe to call more than once."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        # Wait for in-flight requests: each busy slot comes back to the queue when done.
        drained = [self._idle.get() for _ in range(len(self._slots))]
        for slot in drained:
            slot.release()
        # Hand the emptied slots back so blocked callers wake up and see the pool is closed.
        for slot in drained:
            self._idle.put(slot)
        logger.debug("Pool '%s' closed", self.name)

    def __enter__(self) -> "BackendPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"BackendPool(name={self.name!r}, size={self.size}, {state})"
