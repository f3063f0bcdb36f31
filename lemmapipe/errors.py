"""Exception hierarchy for lemmapipe."""

from __future__ import annotations

from typing import Optional


class LemmapipeError(Exception):
    """Base class for all lemmapipe errors."""


class ConfigurationError(LemmapipeError):
    """
    Static configuration cannot be honored (unknown tagset, unsupported engine language,
    missing backend module).

    Raised while a lemmatizer is being built. It is not meant to be caught and retried:
    the same configuration will fail the same way on every attempt.
    """


class DictionaryLoadError(LemmapipeError):
    """The dictionary resource could not be opened, read or decoded."""

    def __init__(self, message: str, *, path: Optional[str] = None, line: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.line = line


class LemmaNotFoundError(LemmapipeError):
    """No dictionary entry exists for the word/POS pair and no stemmer fallback is enabled."""

    def __init__(self, word: str, pos: str = ""):
        super().__init__(f"Lemma for '{word}' was not found")
        self.word = word
        self.pos = pos


class FallbackError(LemmapipeError):
    """A stemmer or speller engine failed while processing a single word."""

    def __init__(self, stage: str, word: str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{stage} fallback failed for '{word}'{detail}")
        self.stage = stage
        self.word = word


class PoolClosedError(LemmapipeError, RuntimeError):
    """Work was submitted to a backend pool after it was closed."""
