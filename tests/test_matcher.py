"""Tests for linux_qa_searcher.matcher (normalize, edit_distance, match, find_answer)."""
from __future__ import annotations

import pytest

from linux_qa_searcher.corpus import Corpus, QAEntry, builtin_corpus
from linux_qa_searcher.matcher import (
    APPROXIMATE_SUFFIX,
    NOT_FOUND_MESSAGE,
    MatchStage,
    edit_distance,
    find_answer,
    match,
    normalize,
)


@pytest.fixture
def small_corpus() -> Corpus:
    return Corpus.from_pairs(
        [
            ("¿Qué comando muestra el espacio libre en disco?", "df -h"),
            ("¿Qué es el kernel?", "Núcleo del sistema operativo"),
            ("¿Dónde se almacenan los logs del sistema?", "/var/log"),
        ]
    )


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


def test_normalize_none_is_empty():
    assert normalize(None) == ""


def test_normalize_lowercases_and_keeps_accents():
    assert normalize("ÁRBOL Qué") == "árbol qué"


def test_normalize_strips_question_marks():
    assert (
        normalize("¿Qué comando muestra el espacio libre en disco?")
        == "qué comando muestra el espacio libre en disco"
    )


def test_normalize_replaces_every_punctuation_character():
    assert normalize("a¿b?c!d.e:f,g;h\"i'j(k)l-m") == "a b c d e f g h i j k l m"


def test_normalize_collapses_whitespace():
    assert normalize("  Hola,\t(mundo)!\n") == "hola mundo"


def test_normalize_dash_in_command():
    assert normalize("ls -l") == "ls l"


def test_normalize_punctuation_only_is_empty():
    assert normalize("¿?!.:") == ""


@pytest.mark.parametrize(
    "text",
    [
        "",
        "¿Qué es el kernel?",
        "  Muchos    espacios\t\ty\nlíneas  ",
        "(paréntesis) - 'comillas' \"dobles\"",
        "ÑANDÚ;;;;",
    ],
)
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


# ---------------------------------------------------------------------------
# edit_distance
# ---------------------------------------------------------------------------


def test_edit_distance_classic_example():
    assert edit_distance("kitten", "sitting") == 3


def test_edit_distance_is_symmetric():
    pairs = [("kitten", "sitting"), ("flaw", "lawn"), ("a", "abcdef"), ("qué", "que")]
    for a, b in pairs:
        assert edit_distance(a, b) == edit_distance(b, a)


def test_edit_distance_identity():
    for s in ("", "x", "qué es el kernel"):
        assert edit_distance(s, s) == 0


def test_edit_distance_against_empty_is_length():
    assert edit_distance("", "abc") == 3
    assert edit_distance("abc", "") == 3
    assert edit_distance("", "") == 0


def test_edit_distance_none_treated_as_empty():
    assert edit_distance(None, "ab") == 2
    assert edit_distance("ab", None) == 2


def test_edit_distance_accented_character_is_one_substitution():
    assert edit_distance("qué", "que") == 1


def test_edit_distance_mixed_operations():
    assert edit_distance("flaw", "lawn") == 2


# ---------------------------------------------------------------------------
# Stage 1 – exact
# ---------------------------------------------------------------------------


def test_exact_match_returns_verbatim_answer(small_corpus):
    assert find_answer(small_corpus, "¿qué es el KERNEL") == "Núcleo del sistema operativo"
    result = match(small_corpus, "qué es el kernel")
    assert result.stage == MatchStage.EXACT
    assert result.index == 1
    assert result.distance is None


def test_exact_match_beats_earlier_containment():
    corpus = Corpus.from_pairs([("abcd", "contains"), ("abc", "exact")])
    assert find_answer(corpus, "abc") == "exact"


def test_exact_match_beats_closer_fuzzy_candidate():
    corpus = Corpus.from_pairs([("abd", "fuzzy"), ("abc", "exact")])
    assert find_answer(corpus, "ABC?") == "exact"


# ---------------------------------------------------------------------------
# Stage 2 – containment
# ---------------------------------------------------------------------------


def test_query_contained_in_question(small_corpus):
    assert find_answer(small_corpus, "los logs del sistema") == "/var/log"
    assert match(small_corpus, "los logs del sistema").stage == MatchStage.CONTAINMENT


def test_question_contained_in_query(small_corpus):
    assert (
        find_answer(small_corpus, "Dime, ¿qué es el kernel? por favor")
        == "Núcleo del sistema operativo"
    )


def test_containment_picks_first_in_corpus_order():
    corpus = Corpus.from_pairs(
        [("listar archivos ocultos", "first"), ("listar archivos grandes", "second")]
    )
    assert find_answer(corpus, "listar archivos") == "first"


def test_empty_query_matches_first_entry(small_corpus):
    for query in ("", "¿?!", None):
        result = match(small_corpus, query)
        assert result.stage == MatchStage.CONTAINMENT
        assert result.index == 0
        assert find_answer(small_corpus, query) == "df -h"


def test_empty_query_exact_matches_blank_question():
    corpus = Corpus.from_pairs([("algo", "first"), ("?!", "blank")])
    assert find_answer(corpus, "...") == "blank"


# ---------------------------------------------------------------------------
# Stage 3 – fuzzy
# ---------------------------------------------------------------------------


def test_fuzzy_match_appends_suffix(small_corpus):
    answer = find_answer(small_corpus, "que es el kernal")
    assert answer == "Núcleo del sistema operativo" + APPROXIMATE_SUFFIX
    assert answer.endswith("\n\n(Respuesta aproximada basada en coincidencia de texto)")


def test_fuzzy_match_result_fields(small_corpus):
    result = match(small_corpus, "que es el kernal")
    assert result.stage == MatchStage.FUZZY
    assert result.index == 1
    assert result.distance == 2
    assert result.found


def test_fuzzy_tie_keeps_earliest_entry():
    corpus = Corpus.from_pairs([("abcx", "first"), ("abcy", "second")])
    assert find_answer(corpus, "abcz") == "first" + APPROXIMATE_SUFFIX


def test_fuzzy_threshold_is_inclusive():
    corpus = Corpus.from_pairs([("abcde", "hit")])
    # distance 2, limit 5 * 0.4 == 2.0
    assert find_answer(corpus, "abcyz") == "hit" + APPROXIMATE_SUFFIX


def test_fuzzy_threshold_exceeded_is_not_found():
    corpus = Corpus.from_pairs([("abcde", "hit")])
    # distance 3, limit 2.0
    assert find_answer(corpus, "abxyz") == NOT_FOUND_MESSAGE


def test_custom_threshold(small_corpus):
    assert find_answer(small_corpus, "que es el kernal", threshold=0.0) == NOT_FOUND_MESSAGE
    assert find_answer(small_corpus, "qué es el kernel", threshold=0.0) == (
        "Núcleo del sistema operativo"
    )


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------


def test_empty_corpus_returns_not_found():
    assert find_answer(Corpus(), "¿Qué es el kernel?") == NOT_FOUND_MESSAGE
    assert find_answer([], "") == NOT_FOUND_MESSAGE
    result = match([], "cualquier cosa")
    assert result.stage == MatchStage.NONE
    assert result.entry is None
    assert not result.found


def test_not_found_message_text():
    assert NOT_FOUND_MESSAGE == (
        "No encontré una respuesta precisa — intenta escribir la pregunta con "
        "más palabras clave."
    )


def test_accepts_plain_list_of_entries():
    entries = [QAEntry(question="¿Qué es el kernel?", answer="Núcleo")]
    assert find_answer(entries, "que es el kernel") == "Núcleo" + APPROXIMATE_SUFFIX


# ---------------------------------------------------------------------------
# Scenarios against the built-in corpus
# ---------------------------------------------------------------------------


def test_builtin_accented_question_is_exact():
    corpus = builtin_corpus()
    assert find_answer(corpus, "qué comando muestra el espacio libre en disco") == "df -h"


def test_builtin_unaccented_question_is_approximate():
    corpus = builtin_corpus()
    result = match(corpus, "que comando muestra el espacio libre en disco")
    assert result.stage == MatchStage.FUZZY
    assert result.distance == 1
    assert result.render() == "df -h" + APPROXIMATE_SUFFIX


def test_builtin_partial_question_is_containment():
    corpus = builtin_corpus()
    assert find_answer(corpus, "espacio libre en disco") == "df -h"
    assert find_answer(corpus, "los logs del sistema") == "/var/log"


def test_builtin_unrelated_query_is_not_found():
    corpus = builtin_corpus()
    assert find_answer(corpus, "xyz totally unrelated gibberish not linux") == NOT_FOUND_MESSAGE
