"""
lemmapipe: dictionary-first lemmatization with stemming and spell-checking fallbacks.

POS tags from several tagsets (Penn Treebank, FreeLing, WordNet) are normalized to the
Universal Tagset, and the non-thread-safe stemmer/speller engines are served through
bounded pools so a single lemmatizer can be shared between threads.
"""

__version__ = "1.0.0"

from lemmapipe.config import LemmatizerConfig
from lemmapipe.dictionary import DictionaryStore
from lemmapipe.errors import (
    ConfigurationError,
    DictionaryLoadError,
    FallbackError,
    LemmaNotFoundError,
    LemmapipeError,
    PoolClosedError,
)
from lemmapipe.lemmatizer import Lemmatizer, LemmaResult, build, new
from lemmapipe.tagset import map_pos

__all__ = [
    'ConfigurationError',
    'DictionaryLoadError',
    'DictionaryStore',
    'FallbackError',
    'LemmaNotFoundError',
    'LemmaResult',
    'Lemmatizer',
    'LemmatizerConfig',
    'LemmapipeError',
    'PoolClosedError',
    'build',
    'map_pos',
    'new',
    '__version__',
]
