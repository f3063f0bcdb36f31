"""Hunspell speller backend (phunspell, bundled LibreOffice dictionaries)."""

from __future__ import annotations

from typing import List

from ..backend_spec import SPELLER, BackendSpec


class HunspellEngine:
    """One Hunspell dictionary handle. Not safe for concurrent use."""

    def __init__(self, language: str):
        try:
            import phunspell
        except ImportError as exc:
            raise ImportError(
                "Hunspell backend requires the 'phunspell' package. "
                "Install it with: pip install phunspell"
            ) from exc
        try:
            self._speller = phunspell.Phunspell(language)
        except Exception as exc:  # PhunspellError, or OSError for unreadable dictionaries
            raise ValueError(f"No Hunspell dictionary for '{language}': {exc}") from exc
        self.language = language

    def check(self, word: str) -> bool:
        return bool(self._speller.lookup(word))

    def suggest(self, word: str) -> List[str]:
        return list(self._speller.suggest(word))


BACKEND_SPEC = BackendSpec(
    name="hunspell",
    kind=SPELLER,
    description="Hunspell spell checking via phunspell",
    factory=HunspellEngine,
    module_name="phunspell",
    install_hint="pip install phunspell",
    url="https://github.com/dvwright/phunspell",
)
