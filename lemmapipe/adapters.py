"""
Stemmer and speller adapters.

Each adapter validates its engine eagerly (a bad language is a deployment error, not a
per-word one) and then routes every call through a BackendPool so the non-reentrant
engines are never shared between threads.
"""

from __future__ import annotations

import logging

from .backend_registry import resolve_backend
from .backend_spec import SPELLER, STEMMER, BackendSpec, SpellerEngine, StemmerEngine
from .errors import ConfigurationError, FallbackError
from .pool import BackendPool, FallbackRequest

logger = logging.getLogger(__name__)


class _FallbackAdapter:
    kind = ""

    def __init__(self, language: str, size: int = 1, backend: str = ""):
        spec = resolve_backend(backend, self.kind)
        self._probe(spec, language)
        self.language = language
        self.backend = spec.name
        self._pool = BackendPool(spec.factory, self._work, size, name=f"{spec.name}:{language}")
        logger.debug("%s adapter ready: backend=%s language=%s size=%d", self.kind, spec.name, language, size)

    def _probe(self, spec: BackendSpec, language: str) -> None:
        try:
            engine = spec.factory(language)
        except (ImportError, ValueError, LookupError, OSError) as exc:
            raise ConfigurationError(
                f"Cannot load {self.kind} backend '{spec.name}' for language '{language}': {exc}"
            ) from exc
        close = getattr(engine, "close", None)
        if callable(close):
            close()

    @staticmethod
    def _work(engine, request: FallbackRequest) -> str:
        raise NotImplementedError

    def _process(self, language: str, word: str) -> str:
        try:
            return self._pool.process(FallbackRequest(language=language, word=word))
        except FallbackError:
            raise
        except Exception as exc:
            if self._pool.closed:
                raise
            raise FallbackError(self.kind, word, exc) from exc

    @property
    def size(self) -> int:
        return self._pool.size

    def close(self) -> None:
        self._pool.close()


class StemmerAdapter(_FallbackAdapter):
    """Produces morphological stems. Results are never cached."""

    kind = STEMMER

    def __init__(self, language: str, size: int = 1, backend: str = "snowball"):
        super().__init__(language, size, backend)

    @staticmethod
    def _work(engine: StemmerEngine, request: FallbackRequest) -> str:
        return engine.stem(request.word)

    def stem(self, language: str, word: str) -> str:
        return self._process(language, word)


class SpellerAdapter(_FallbackAdapter):
    """
    Produces spell-corrected words.

    The first suggestion is taken as-is; no ranking beyond the engine's own order.
    """

    kind = SPELLER

    def __init__(self, language: str, size: int = 1, backend: str = "hunspell"):
        super().__init__(language, size, backend)

    @staticmethod
    def _work(engine: SpellerEngine, request: FallbackRequest) -> str:
        word = request.word
        if engine.check(word):
            return word
        suggestions = engine.suggest(word)
        if not suggestions:
            return word
        return suggestions[0]

    def correct(self, language: str, word: str) -> str:
        return self._process(language, word)
