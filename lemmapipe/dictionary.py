"""
Lemma dictionary loading and lookup.

Dictionary files are plain UTF-8 text with one entry per line:

    inflected_word canonical_lemma POS_TAG

Fields are separated by single spaces; anything after the third field is ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from .errors import DictionaryLoadError
from .tagset import PosMapper, TagsetRegistry, default_registry

logger = logging.getLogger(__name__)

DictionaryKey = Tuple[str, str]


class DictionaryStore:
    """Immutable (word, POS) -> lemma mapping, built once and shared read-only."""

    def __init__(self, entries: Mapping[DictionaryKey, str], *, source: Optional[str] = None):
        self._entries: Mapping[DictionaryKey, str] = MappingProxyType(dict(entries))
        self.source = source

    @classmethod
    def load(
        cls,
        path: Union[str, Path],
        tagset_name: Optional[str] = None,
        tagset_language: Optional[str] = None,
        *,
        registry: TagsetRegistry = default_registry,
    ) -> "DictionaryStore":
        """
        Load a dictionary file, optionally mapping its tags to the Universal Tagset.

        Tags with no mapping in the tagset are stored under the empty POS, so they
        can only be found by looking up the empty POS.

        Raises:
            DictionaryLoadError: if the file cannot be opened, read or decoded, or a line
                has fewer than three fields
            ConfigurationError: if the tagset has no table for the language
        """
        path = Path(path)
        try:
            handle = path.open("r", encoding="utf-8")
        except OSError as exc:
            raise DictionaryLoadError(f"Cannot open dictionary {path}: {exc}", path=str(path)) from exc

        with handle:
            mapper: Optional[PosMapper] = None
            if tagset_name:
                mapper = registry.map_pos(tagset_name, tagset_language or "")
            entries, unmapped = cls._parse(handle, path, mapper)

        if unmapped:
            logger.debug("%s: %d entries have tags unknown to tagset '%s'", path, unmapped, tagset_name)
        logger.debug("Loaded %d dictionary entries from %s", len(entries), path)
        return cls(entries, source=str(path))

    @staticmethod
    def _parse(handle, path: Path, mapper: Optional[PosMapper]) -> Tuple[Dict[DictionaryKey, str], int]:
        entries: Dict[DictionaryKey, str] = {}
        unmapped = 0
        line_num = 0
        try:
            for line_num, line in enumerate(handle, 1):
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                fields = line.split(" ")
                if len(fields) < 3:
                    raise DictionaryLoadError(
                        f"{path}:{line_num}: expected 'word lemma POS', got {line!r}",
                        path=str(path),
                        line=line_num,
                    )
                word, lemma, pos = fields[0], fields[1], fields[2]
                if mapper is not None:
                    pos, found = mapper(pos)
                    if not found:
                        unmapped += 1
                entries[(word.lower(), pos.upper())] = lemma
        except UnicodeDecodeError as exc:
            raise DictionaryLoadError(
                f"{path}:{line_num + 1}: cannot decode line: {exc}", path=str(path), line=line_num + 1
            ) from exc
        except OSError as exc:
            raise DictionaryLoadError(f"Cannot read dictionary {path}: {exc}", path=str(path)) from exc
        return entries, unmapped

    def lookup(self, word: str, pos: str) -> Tuple[str, bool]:
        """Look up a lowercased word and an uppercased POS."""
        lemma = self._entries.get((word, pos))
        if lemma is None:
            return "", False
        return lemma, True

    @property
    def entries(self) -> Mapping[DictionaryKey, str]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: DictionaryKey) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[DictionaryKey]:
        return iter(self._entries)
