"""
Configuration classes for lemmapipe.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class LemmatizerConfig:
    """Configuration for a Lemmatizer instance (immutable once built)."""
    stemmer_fallback: bool = False  # Stem words missing from the dictionary
    stemmer_language: str = ""  # Snowball algorithm name, e.g. 'english'
    speller_fallback: bool = False  # Spell-correct stems (or the word itself when stemming is off)
    speller_language: str = ""  # Hunspell locale, e.g. 'en_US'
    concurrent: bool = False  # One engine per CPU instead of a single serialized engine
    stemmer_backend: str = "snowball"
    speller_backend: str = "hunspell"

    @property
    def pool_size(self) -> int:
        """Number of engine slots per backend pool."""
        if not self.concurrent:
            return 1
        return os.cpu_count() or 1

    @property
    def pre_corrects(self) -> bool:
        """Whether the word is spell-corrected before the dictionary lookup."""
        return self.speller_fallback and not self.stemmer_fallback
