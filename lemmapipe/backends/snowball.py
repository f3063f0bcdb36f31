"""Snowball stemmer backend (PyStemmer bindings to libstemmer)."""

from __future__ import annotations

from ..backend_spec import STEMMER, BackendSpec


class SnowballEngine:
    """One libstemmer instance. Not safe for concurrent use."""

    def __init__(self, language: str):
        try:
            import Stemmer
        except ImportError as exc:
            raise ImportError(
                "Snowball backend requires the 'PyStemmer' package. "
                "Install it with: pip install PyStemmer"
            ) from exc
        try:
            self._stemmer = Stemmer.Stemmer(language)
        except KeyError as exc:
            raise ValueError(
                f"Snowball has no stemmer for '{language}'. "
                f"Supported: {', '.join(sorted(Stemmer.algorithms()))}"
            ) from exc
        self.language = language

    def stem(self, word: str) -> str:
        return self._stemmer.stemWord(word)



BACKEND_SPEC = BackendSpec(
    name="snowball",
    kind=STEMMER,
    description="Snowball stemming algorithms via PyStemmer",
    factory=SnowballEngine,
    module_name="Stemmer",
    install_hint="pip install PyStemmer",
    url="https://snowballstem.org/",
)
