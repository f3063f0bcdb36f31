"""
Derive engine language parameters from a single BCP 47 language tag.

The engines expect different formats: the tagset registry wants the base subtag
('en'), Snowball wants an English language name ('english') and Hunspell wants a
locale with region ('en_US').
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

import langcodes
import pycountry

from .errors import ConfigurationError

_PARENTHETICAL = re.compile(r"\s*\([^)]*\)\s*")
_NAME_PREFIXES = ("modern ",)


@dataclass(frozen=True)
class LanguageParameters:
    tagset_language: str
    stemmer_language: str
    speller_language: str


def _parse(language_tag: str) -> Optional[langcodes.Language]:
    tag = (language_tag or "").strip()
    if not tag:
        return None
    try:
        return langcodes.Language.get(tag)
    except ValueError as exc:  # LanguageTagError
        raise ConfigurationError(f"Invalid language tag '{language_tag}': {exc}") from exc


def base_language(language_tag: str) -> str:
    """
    Return the base language subtag of a BCP 47 tag.

    Examples:
        "en-GB" -> "en"
        "pt_BR" -> "pt"
        "" -> ""
    """
    lang = _parse(language_tag)
    if lang is None or not lang.language or lang.language == "und":
        return ""
    return lang.language


def clean_language_name(language_name: str) -> str:
    """
    Reduce an ISO 639 reference name to the plain name Snowball uses.

    Examples:
        "Modern Greek (1453-)" -> "greek"
        "English" -> "english"
    """
    name = _PARENTHETICAL.sub(" ", language_name).strip().lower()
    for prefix in _NAME_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
    return name.split(";")[0].strip()


_LANGUAGE_BY_CODE = {}
for _lang in pycountry.languages:
    for _attr in ("alpha_2", "alpha_3", "bibliographic", "terminology"):
        _code = getattr(_lang, _attr, None)
        if _code:
            _LANGUAGE_BY_CODE.setdefault(_code.lower(), _lang)


def _lookup_language_by_code(code: str):
    # lookup() also matches names, so 'en' alone would resolve to the 'En' language (enc)
    if not code:
        return None
    code_key = code.lower()
    if code_key in _LANGUAGE_BY_CODE:
        return _LANGUAGE_BY_CODE[code_key]
    try:
        return pycountry.languages.lookup(code)
    except LookupError:
        return None


def stemmer_language(language_tag: str) -> str:
    """Return the English name of the tag's language, lowercased ('en-US' -> 'english')."""
    base = base_language(language_tag)
    if not base:
        return ""
    lang_obj = _lookup_language_by_code(base)
    if lang_obj is not None:
        return clean_language_name(lang_obj.name)
    return base


def speller_language(language_tag: str) -> str:
    """
    Return a Hunspell locale for the tag ('en-GB' -> 'en_GB').

    Tags without a region are expanded to their most likely region ('en' -> 'en_US').
    """
    lang = _parse(language_tag)
    if lang is None or not lang.language or lang.language == "und":
        return ""
    if not lang.territory:
        lang = lang.maximize()
    if lang.territory:
        return f"{lang.language}_{lang.territory}"
    return lang.language


def derive_language_parameters(language_tag: str) -> LanguageParameters:
    return LanguageParameters(
        tagset_language=base_language(language_tag),
        stemmer_language=stemmer_language(language_tag),
        speller_language=speller_language(language_tag),
    )
