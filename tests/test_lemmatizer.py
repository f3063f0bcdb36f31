from concurrent.futures import ThreadPoolExecutor

import pytest

from lemmapipe import build, new
from lemmapipe.backend_registry import register_backend_spec, unregister_backend
from lemmapipe.backend_spec import SPELLER, BackendSpec
from lemmapipe.config import LemmatizerConfig
from lemmapipe.errors import (
    ConfigurationError,
    DictionaryLoadError,
    FallbackError,
    LemmaNotFoundError,
    PoolClosedError,
)
from lemmapipe.pool import BackendPool


@pytest.mark.parametrize(
    "word,pos,lemma",
    [
        ("am", "vbp", "be"),
        ("Are", "vbp", "be"),
        ("caresses", "NNS", "caress"),
        ("operational", "JJ", "operational"),
        ("marketing", "nn", "marketing"),
        ("abandoning", "VBG", "abandon"),
        ("abracadabra", "NN", "abracadabra"),
    ],
)
def test_dictionary_lemmas(make_lemmatizer, word, pos, lemma):
    assert make_lemmatizer().lemma(word, pos) == (lemma, True, None)


def test_case_insensitive(make_lemmatizer):
    lemmatizer = make_lemmatizer()
    assert lemmatizer.lemma("Are", "VBP") == lemmatizer.lemma("are", "vbp") == ("be", True, None)


def test_contraction_and_homographs(make_lemmatizer):
    lemmatizer = make_lemmatizer()
    assert lemmatizer.lemma("i'dn't've", "PRP+MD+RB+VBP") == ("i+would+not+have", True, None)
    assert lemmatizer.lemma("stranger", "NN") == ("stranger", True, None)
    assert lemmatizer.lemma("stranger", "JJR") == ("strange", True, None)


def test_miss_without_fallbacks(make_lemmatizer):
    lemma, found, error = make_lemmatizer().lemma("quadrillion", "NN")
    assert lemma == "quadrillion"
    assert found is False
    assert isinstance(error, LemmaNotFoundError)
    assert error.word == "quadrillion"


def test_raise_for_error(make_lemmatizer):
    lemmatizer = make_lemmatizer()
    with pytest.raises(LemmaNotFoundError):
        lemmatizer.lemma("quadrillion", "NN").raise_for_error()
    assert lemmatizer.lemma("caresses", "NNS").raise_for_error().lemma == "caress"


def test_tagset_lemmas(make_lemmatizer):
    lemmatizer = make_lemmatizer(tagset="freeling", language="en-GB")
    assert lemmatizer.lemma("i'dn't've", "PRON") == ("i+would+not+have", True, None)
    assert lemmatizer.lemma("stranger", "NOUN") == ("stranger", True, None)
    assert lemmatizer.lemma("stranger", "adj") == ("strange", True, None)
    lemma, found, error = lemmatizer.lemma("quadrillion", "NOUN")
    assert (lemma, found) == ("quadrillion", False)
    assert isinstance(error, LemmaNotFoundError)


def test_lookup_through_other_tagset(make_lemmatizer):
    from lemmapipe.tagset import map_pos

    lemmatizer = make_lemmatizer(tagset="freeling", language="en-GB")
    wordnet = map_pos("wordnet", "en-GB")
    assert lemmatizer.lemma("words", wordnet("n")[0]) == ("word", True, None)
    assert lemmatizer.lemma("running", wordnet("v")[0]) == ("run", True, None)


def test_stemmer_fallback(make_lemmatizer):
    lemmatizer = make_lemmatizer(stem=True, tagset="freeling")
    assert lemmatizer.lemma("teenager", "NONSENSE") == ("teenag", False, None)
    assert lemmatizer.lemma("bubbling", "NONSENSE") == ("bubbl", False, None)
    assert lemmatizer.lemma("loving", "NONSENSE") == ("love", False, None)
    assert lemmatizer.lemma("abracadabrated", "ADJ") == ("abracadabr", False, None)


def test_stemmer_and_speller_fallback(make_lemmatizer):
    lemmatizer = make_lemmatizer(stem=True, spell=True, tagset="freeling")
    assert lemmatizer.lemma("teenager", "NONSENSE") == ("teenage", False, None)
    assert lemmatizer.lemma("bubbling", "NONSENSE") == ("bubble", False, None)
    assert lemmatizer.lemma("abracadabrated", "ADJ") == ("abracadabra", False, None)


def test_dictionary_hit_wins_over_fallbacks(make_lemmatizer):
    lemmatizer = make_lemmatizer(stem=True, spell=True, tagset="freeling")
    assert lemmatizer.lemma("caresses", "NOUN") == ("caress", True, None)
    assert lemmatizer.lemma("teenager", "NOUN") == ("teenager", True, None)


def test_speller_only_precorrects_before_lookup(make_lemmatizer):
    lemmatizer = make_lemmatizer(spell=True, tagset="freeling", language="en")
    assert lemmatizer.lemma("teeenager", "NOUN") == ("teenager", True, None)
    assert lemmatizer.lemma("lovinh", "VERB") == ("love", True, None)
    assert lemmatizer.lemma("typo", "NOUN") == ("typo", True, None)
    lemma, found, error = lemmatizer.lemma("juse", "NOUN")
    assert (lemma, found) == ("Jude", False)
    assert isinstance(error, LemmaNotFoundError)


def test_stem(make_lemmatizer):
    assert make_lemmatizer(stem=True).stem("teenager") == "teenag"
    assert make_lemmatizer(stem=True, spell=True).stem("teenager") == "teenage"
    assert make_lemmatizer(stem=True, spell=True).stem("laboratory") == "laboratory"


def test_stem_bypasses_dictionary(make_lemmatizer):
    assert make_lemmatizer(stem=True).stem("caresses") == "caress"
    assert make_lemmatizer(stem=True).stem("running") == "runn"


def test_stem_without_stemmer(make_lemmatizer):
    with pytest.raises(ConfigurationError):
        make_lemmatizer(spell=True).stem("teenager")


def test_pools_exist_only_for_enabled_fallbacks(make_lemmatizer):
    assert make_lemmatizer()._stemmer is None
    assert make_lemmatizer()._speller is None
    speller_only = make_lemmatizer(spell=True)
    assert speller_only._stemmer is None
    assert speller_only._speller.size == 1


def test_fallback_failure_is_per_call(make_lemmatizer):
    lemmatizer = make_lemmatizer(stem=True)
    lemma, found, error = lemmatizer.lemma("explode", "NN")
    assert (lemma, found) == ("explode", False)
    assert isinstance(error, FallbackError)
    assert not isinstance(error, LemmaNotFoundError)
    with pytest.raises(FallbackError):
        lemmatizer.stem("explode")
    assert lemmatizer.lemma("teenager", "XX") == ("teenag", False, None)


def test_idempotent(make_lemmatizer):
    lemmatizer = make_lemmatizer(stem=True, spell=True)
    first = [lemmatizer.lemma(w, "NN") for w in ("teenager", "typo", "bubbling", "caresses")]
    second = [lemmatizer.lemma(w, "NN") for w in ("teenager", "typo", "bubbling", "caresses")]
    assert first == second


def test_concurrent_matches_sequential(make_lemmatizer, violations):
    words = [f"{stem}{suffix}" for stem in ("teenager", "bubbl", "lov", "word", "typo", "xyz")
             for suffix in ("", "s", "ing", "ed", "er")] * 8
    words += ["concurrency", "caresses", "laboratory"]
    sequential = make_lemmatizer(stem=True, spell=True, tagset="freeling")
    concurrent = make_lemmatizer(stem=True, spell=True, tagset="freeling", concurrent=True)
    expected = [sequential.lemma(word, "NOUN") for word in words]

    with ThreadPoolExecutor(max_workers=16) as executor:
        results = list(executor.map(lambda word: concurrent.lemma(word, "NOUN"), words))

    assert results == expected
    assert results[words.index("concurrency")] == ("concurrency", True, None)
    assert violations == []


def test_close_releases_pools(make_lemmatizer):
    lemmatizer = make_lemmatizer(stem=True, spell=True)
    lemmatizer.close()
    with pytest.raises(PoolClosedError):
        lemmatizer.stem("teenager")
    lemmatizer.close()


def test_context_manager(en_dict):
    with new(en_dict, "en-US", None, True, False, False, stemmer_backend="fake-stemmer") as lemmatizer:
        assert lemmatizer.stem("teenager") == "teenag"
    with pytest.raises(PoolClosedError):
        lemmatizer.stem("teenager")


def test_pool_size_follows_concurrency_flag():
    assert LemmatizerConfig(concurrent=False).pool_size == 1
    assert LemmatizerConfig(concurrent=True).pool_size >= 1


def test_build_with_explicit_languages(en_dict):
    lemmatizer = build(
        en_dict, True, "english", True, "en_GB", "penn", "en", False,
        stemmer_backend="fake-stemmer", speller_backend="fake-speller",
    )
    try:
        assert lemmatizer.lemma("three", "NUM") == ("three", True, None)
        assert lemmatizer.stem("teenager") == "teenage"
    finally:
        lemmatizer.close()


def test_wrong_tagset_is_fatal(en_dict):
    with pytest.raises(ConfigurationError):
        new(en_dict, "en-US", "wrong")


def test_wrong_tagset_language_is_fatal(en_dict):
    with pytest.raises(ConfigurationError):
        new(en_dict, "pt-BR", "freeling")


def test_wrong_stemmer_language_is_fatal(en_dict):
    with pytest.raises(ConfigurationError):
        build(en_dict, True, "tokipona", stemmer_backend="fake-stemmer")


def test_wrong_speller_language_is_fatal(en_dict):
    with pytest.raises(ConfigurationError):
        build(en_dict, False, "", True, "tokipona", speller_backend="fake-speller")


def test_unknown_backend_is_fatal(en_dict):
    with pytest.raises(ConfigurationError):
        build(en_dict, True, "english", stemmer_backend="nope")


def test_relative_path_installs_bundled_dictionaries(lemmapipe_home):
    lemmatizer = new("en.lmm", "en-US", "penn")
    assert (lemmapipe_home / "en.lmm").exists()
    assert lemmatizer.lemma("caresses", "NOUN") == ("caress", True, None)


def test_wrong_relative_path(lemmapipe_home):
    with pytest.raises(DictionaryLoadError):
        new("uk.lmm", "pt-BR", "freeling")


def test_wrong_absolute_path(tmp_path):
    with pytest.raises(DictionaryLoadError):
        new(str(tmp_path / "en.lmm"), "pt-BR", "freeling")


def test_failed_speller_setup_closes_stemmer_pool(en_dict, monkeypatch):
    def broken(language):
        raise RuntimeError("speller library crashed")

    register_backend_spec(BackendSpec(name="broken-speller", kind=SPELLER, description="", factory=broken))
    closed = []
    original_close = BackendPool.close

    def recording_close(self):
        closed.append(self.name)
        original_close(self)

    monkeypatch.setattr(BackendPool, "close", recording_close)
    try:
        with pytest.raises(RuntimeError, match="speller library crashed"):
            build(en_dict, True, "english", True, "en_US",
                  stemmer_backend="fake-stemmer", speller_backend="broken-speller")
    finally:
        unregister_backend("broken-speller")
    assert closed == ["fake-stemmer:english"]
