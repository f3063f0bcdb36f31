import threading
import time
from contextlib import contextmanager
from pathlib import Path

import pytest

from lemmapipe.backend_registry import register_backend_spec
from lemmapipe.backend_spec import SPELLER, STEMMER, BackendSpec
from lemmapipe.lemmatizer import new

EN_DICT = Path(__file__).resolve().parent.parent / "lemmapipe" / "dicts" / "en.lmm"

# Engines that were entered by two threads at once
VIOLATIONS = []
_violations_lock = threading.Lock()


@contextmanager
def exclusive(engine):
    if engine.busy:
        with _violations_lock:
            VIOLATIONS.append(engine)
    engine.busy = True
    try:
        time.sleep(0.0002)
        yield
    finally:
        engine.busy = False


class FakeStemmer:
    """Deterministic stand-in for a Snowball stemmer."""

    STEMS = {
        "teenager": "teenag",
        "laboratory": "laboratori",
        "bubbling": "bubbl",
        "loving": "love",
        "loveing": "love",
        "abracadabrated": "abracadabr",
        "caresses": "caress",
    }

    def __init__(self, language):
        if language != "english":
            raise ValueError(f"no stemmer for '{language}'")
        self.language = language
        self.busy = False
        self.closed = False

    def stem(self, word):
        with exclusive(self):
            if word == "explode":
                raise RuntimeError("engine crashed")
            if word in self.STEMS:
                return self.STEMS[word]
            if word.endswith("ing") and len(word) > 5:
                return word[:-3]
            if word.endswith("s") and len(word) > 3:
                return word[:-1]
            return word

    def close(self):
        self.closed = True


class FakeSpeller:
    """Deterministic stand-in for a Hunspell speller."""

    KNOWN = {
        "teenage", "teenager", "bubble", "love", "loving", "typo", "laboratory",
        "concurrency", "caress", "word", "run",
    }
    SUGGESTIONS = {
        "teenag": ["teenage", "teenager"],
        "teeenager": ["teenager"],
        "bubbl": ["bubble", "bubbly"],
        "laboratori": ["laboratory"],
        "lovinh": ["loving", "love"],
        "juse": ["Jude", "juice"],
        "abracadabr": ["abracadabra"],
    }

    def __init__(self, language):
        if language not in ("en_US", "en_GB"):
            raise ValueError(f"no dictionary for '{language}'")
        self.language = language
        self.busy = False
        self.closed = False

    def check(self, word):
        with exclusive(self):
            return word in self.KNOWN

    def suggest(self, word):
        with exclusive(self):
            return list(self.SUGGESTIONS.get(word, []))

    def close(self):
        self.closed = True


register_backend_spec(BackendSpec(
    name="fake-stemmer",
    kind=STEMMER,
    description="Deterministic test stemmer",
    factory=FakeStemmer,
))
register_backend_spec(BackendSpec(
    name="fake-speller",
    kind=SPELLER,
    description="Deterministic test speller",
    factory=FakeSpeller,
))


@pytest.fixture(autouse=True)
def lemmapipe_home(tmp_path, monkeypatch):
    home = tmp_path / "lemmapipe-home"
    monkeypatch.setenv("LEMMAPIPE_HOME", str(home))
    return home


@pytest.fixture
def en_dict():
    return str(EN_DICT)


@pytest.fixture
def make_lemmatizer(en_dict):
    created = []

    def _make(stem=False, spell=False, concurrent=False, tagset=None, language="en-US"):
        lemmatizer = new(
            en_dict,
            language,
            tagset,
            stem,
            spell,
            concurrent,
            stemmer_backend="fake-stemmer",
            speller_backend="fake-speller",
        )
        created.append(lemmatizer)
        return lemmatizer

    yield _make
    for lemmatizer in created:
        lemmatizer.close()


@pytest.fixture
def violations():
    VIOLATIONS.clear()
    yield VIOLATIONS
    VIOLATIONS.clear()
