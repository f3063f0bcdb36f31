"""
Tagset registry: maps POS tags of external tagsets to the Universal POS Tagset.

Tables are registered per (tagset name, base language). The registry is filled once at
import time and handed to the dictionary loader explicitly.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Tuple

from .errors import ConfigurationError
from .language_utils import base_language
from .tagset_data import BUILTIN_TAGSETS

logger = logging.getLogger(__name__)

PosMapper = Callable[[str], Tuple[str, bool]]

UNIVERSAL_TAGS = (
    "ADJ", "ADP", "ADV", "CONJ", "DET", "NOUN", "NUM", "PRON", "PRT", "VERB", ".", "X",
)


class TagsetRegistry:
    """Named lookup tables, keyed by '<tagset>_<language>'."""

    def __init__(self) -> None:
        self._tables: Dict[str, Mapping[str, str]] = {}

    @staticmethod
    def _key(tagset_name: str, language: str) -> str:
        return f"{tagset_name.lower()}_{language.lower()}"

    def register(self, tagset_name: str, language: str, table: Mapping[str, str]) -> None:
        """Register a table. Values should be Universal Tagset tags."""
        unknown = sorted({pos for pos in table.values() if pos not in UNIVERSAL_TAGS})
        if unknown:
            logger.warning(
                "Tagset '%s' (%s) maps to non-universal tags: %s", tagset_name, language, ", ".join(unknown)
            )
        self._tables[self._key(tagset_name, language)] = MappingProxyType(dict(table))

    def table(self, tagset_name: str, language_tag: str) -> Mapping[str, str]:
        """
        Return the table for a tagset and a language tag (reduced to its base subtag).

        Raises:
            ConfigurationError: if no table is registered for the pair
        """
        language = base_language(language_tag)
        key = self._key(tagset_name, language)
        table = self._tables.get(key)
        if table is None:
            raise ConfigurationError(f"Tagset mapping for '{key}' was not found")
        return table

    def map_pos(self, tagset_name: str, language_tag: str) -> PosMapper:
        """Return a function mapping a raw tag to (universal_tag, found)."""
        table = self.table(tagset_name, language_tag)

        def _map(pos_tag: str) -> Tuple[str, bool]:
            universal = table.get(pos_tag)
            if universal is None:
                return "", False
            return universal, True

        return _map

    def names(self) -> List[Tuple[str, str]]:
        """List registered (tagset, language) pairs."""
        return sorted(tuple(key.rsplit("_", 1)) for key in self._tables)  # type: ignore[misc]

    def __contains__(self, key: Tuple[str, str]) -> bool:
        tagset_name, language = key
        return self._key(tagset_name, language) in self._tables


def _build_default_registry() -> TagsetRegistry:
    registry = TagsetRegistry()
    for tagset_name, tables in BUILTIN_TAGSETS.items():
        for language, table in tables.items():
            registry.register(tagset_name, language, table)
    return registry


default_registry = _build_default_registry()


def register_tagset(tagset_name: str, language: str, table: Mapping[str, str]) -> None:
    """Add a table to the default registry."""
    default_registry.register(tagset_name, language, table)


def map_pos(tagset_name: str, language_tag: str) -> PosMapper:
    """Return a raw-tag -> (universal_tag, found) function from the default registry."""
    return default_registry.map_pos(tagset_name, language_tag)
