"""
Dictionary-first lemmatizer with stemming and spell-correction fallbacks.

Resolution order for ``Lemmatizer.lemma(word, pos)``:

1. the word is lowercased;
2. with the speller on and the stemmer off, the word is spell-corrected first;
3. (word, POS) is looked up in the dictionary, and a hit is returned as-is;
4. on a miss without a stemmer the result carries a LemmaNotFoundError;
5. on a miss with a stemmer the word is stemmed, and the stem is spell-corrected
   when the speller is on.

A Lemmatizer holds no per-call state. The dictionary is read-only and the engines are
only reachable through their pools, so one instance can serve many threads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple, Optional, Union

from .adapters import SpellerAdapter, StemmerAdapter
from .config import LemmatizerConfig
from .dictionary import DictionaryStore
from .errors import ConfigurationError, FallbackError, LemmapipeError, LemmaNotFoundError
from .language_utils import derive_language_parameters
from .storage import resolve_dictionary_path
from .tagset import TagsetRegistry, default_registry

logger = logging.getLogger(__name__)


class LemmaResult(NamedTuple):
    """
    Outcome of a lemma lookup.

    ``found`` reflects the dictionary hit only: a stemmed or corrected value is
    reported with ``found=False`` and ``error=None``. ``error`` is set when no value
    could be produced at all.
    """
    lemma: str
    found: bool
    error: Optional[LemmapipeError] = None

    def raise_for_error(self) -> "LemmaResult":
        if self.error is not None:
            raise self.error
        return self


class Lemmatizer:
    """Resolves (word, POS) pairs to lemmas."""

    def __init__(
        self,
        dictionary: DictionaryStore,
        config: LemmatizerConfig,
    ):
        self.dictionary = dictionary
        self.config = config
        self._stemmer: Optional[StemmerAdapter] = None
        self._speller: Optional[SpellerAdapter] = None
        try:
            if config.stemmer_fallback:
                self._stemmer = StemmerAdapter(
                    config.stemmer_language, config.pool_size, backend=config.stemmer_backend
                )
            if config.speller_fallback:
                self._speller = SpellerAdapter(
                    config.speller_language, config.pool_size, backend=config.speller_backend
                )
        except Exception:
            self.close()
            raise

    def lemma(self, word: str, pos: str) -> LemmaResult:
        """
        Pass the word through the lemmatization/(stemming)/(spelling) pipeline.

        Per-word failures never raise: they are reported in ``LemmaResult.error``.
        """
        word = word.lower()

        if self.config.pre_corrects:
            try:
                word = self._correct(word)
            except FallbackError as exc:
                return LemmaResult(word, False, exc)

        lemma, found = self.dictionary.lookup(word, pos.upper())
        if found:
            return LemmaResult(lemma, True, None)

        if not self.config.stemmer_fallback:
            return LemmaResult(word, False, LemmaNotFoundError(word, pos))

        try:
            lemma = self.stem(word)
        except FallbackError as exc:
            return LemmaResult(word, False, exc)
        return LemmaResult(lemma, False, None)

    def stem(self, word: str) -> str:
        """
        Stem a word without consulting the dictionary.

        When the speller fallback is enabled the stem is spell-corrected; the first
        suggestion is taken even if a later one would fit better.

        Raises:
            ConfigurationError: if the stemmer fallback is disabled
            FallbackError: if an engine fails on this word
        """
        if self._stemmer is None:
            raise ConfigurationError("Stemmer fallback is disabled for this lemmatizer")
        stem = self._stemmer.stem(self.config.stemmer_language, word)
        if self._speller is None:
            return stem
        return self._correct(stem)

    def _correct(self, word: str) -> str:
        return self._speller.correct(self.config.speller_language, word)

    def close(self) -> None:
        """Release the stemmer/speller engines. The instance must not be used afterwards."""
        if self._stemmer is not None:
            self._stemmer.close()
        if self._speller is not None:
            self._speller.close()

    def __enter__(self) -> "Lemmatizer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Lemmatizer(entries={len(self.dictionary)}, stemmer={self.config.stemmer_fallback}, "
            f"speller={self.config.speller_fallback}, pool_size={self.config.pool_size})"
        )


def build(
    dict_path: Union[str, Path],
    stemmer_fallback: bool = False,
    stemmer_language: str = "",
    speller_fallback: bool = False,
    speller_language: str = "",
    tagset_name: Optional[str] = None,
    tagset_language: Optional[str] = None,
    concurrent: bool = False,
    *,
    stemmer_backend: str = "snowball",
    speller_backend: str = "hunspell",
    registry: TagsetRegistry = default_registry,
) -> Lemmatizer:
    """
    Create a Lemmatizer from explicit option values.

    A relative ``dict_path`` is resolved against the lemmapipe home directory (the
    bundled dictionaries are installed there on first use); an absolute one is loaded
    directly. When ``tagset_name`` is given the dictionary tags are mapped to the
    Universal Tagset, so lookups must use Universal Tagset tags.

    Raises:
        DictionaryLoadError: if the dictionary cannot be loaded (recoverable)
        ConfigurationError: on an unknown tagset or an unusable engine language (fatal)
    """
    path = resolve_dictionary_path(dict_path)
    dictionary = DictionaryStore.load(path, tagset_name, tagset_language, registry=registry)
    config = LemmatizerConfig(
        stemmer_fallback=stemmer_fallback,
        stemmer_language=stemmer_language,
        speller_fallback=speller_fallback,
        speller_language=speller_language,
        concurrent=concurrent,
        stemmer_backend=stemmer_backend,
        speller_backend=speller_backend,
    )
    return Lemmatizer(dictionary, config)


def new(
    dict_path: Union[str, Path],
    language_tag: str = "",
    tagset_name: Optional[str] = None,
    stemmer_fallback: bool = False,
    speller_fallback: bool = False,
    concurrent: bool = False,
    **kwargs,
) -> Lemmatizer:
    """
    Create a Lemmatizer, deriving every engine language from one BCP 47 tag.

    'en-GB' gives tagset language 'en', stemmer language 'english' and speller
    locale 'en_GB'. Keyword arguments are passed on to ``build``.
    """
    params = derive_language_parameters(language_tag)
    logger.debug("Language parameters for '%s': %s", language_tag, params)
    return build(
        dict_path,
        stemmer_fallback,
        params.stemmer_language,
        speller_fallback,
        params.speller_language,
        tagset_name,
        params.tagset_language,
        concurrent,
        **kwargs,
    )
