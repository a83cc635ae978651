"""Tests for normalization, sentence splitting, tokenization and n-grams."""

import pytest

from thematic_analyzer.config.lexicon import SPANISH_STOPWORDS
from thematic_analyzer.utils.text import (
    NgramCount,
    normalize,
    split_sentences,
    tokenize,
    top_ngrams,
)


class TestNormalize:
    def test_lowercases_and_strips_diacritics(self):
        assert normalize("Árbol ÑANDÚ!") == "arbol nandu "

    def test_keeps_supported_punctuation(self):
        assert normalize("sí, no: tal vez; auto-gestión_1.") == "si, no: tal vez; auto-gestion_1."

    @pytest.mark.parametrize("text", [
        "",
        "Pingüino en la señal de tránsito",
        "emoji 😀 y símbolos ©®™ € $ # @",
        "İstanbul straße ǅemal",
        "tabs\tand\nnewlines nbsp",
        "́ combining alone",
        "ΕΛΛΗΝΙΚΑ кириллица 中文",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once

    def test_none_is_empty(self):
        assert normalize(None) == ""


class TestSplitSentences:
    def test_splits_on_punctuation_and_newlines(self):
        text = "Hola mundo. ¿Cómo estás? Bien!\n\nAdiós"
        assert split_sentences(text) == ["Hola mundo.", "¿Cómo estás?", "Bien!", "Adiós"]

    def test_does_not_split_inside_numbers(self):
        assert split_sentences("Valor 3.5 millones. Fin") == ["Valor 3.5 millones.", "Fin"]

    def test_drops_empty_pieces(self):
        assert split_sentences("  \n\n  ") == []
        assert split_sentences("") == []


class TestTokenize:
    def test_drops_short_tokens_and_punctuation(self):
        assert tokenize("El problema de acceso es grave.") == ["problema", "acceso", "grave"]

    def test_drops_accented_stopwords_after_folding(self):
        text = "Nosotros también estábamos muy cansados porque había mucho trabajo"
        assert tokenize(text) == ["cansados", "habia", "trabajo"]

    def test_strips_inner_non_word_characters(self):
        assert tokenize("auto-gestión, comunitaria") == ["autogestion", "comunitaria"]

    def test_never_returns_stopwords_or_short_tokens(self):
        text = ("Yo creo que ellos están muy preocupados por el agua, "
                "pero también por sus hijos y la escuela; sí, todos nosotros.")
        tokens = tokenize(text)
        assert tokens
        for token in tokens:
            assert token not in SPANISH_STOPWORDS
            assert len(token) > 2


class TestTopNgrams:
    def test_ranks_by_count_with_first_seen_ties(self):
        result = top_ngrams(["agua potable escasa", "agua potable"], n=2, top=10)
        assert result == [
            NgramCount("agua", 2),
            NgramCount("agua potable", 2),
            NgramCount("potable", 2),
            NgramCount("potable escasa", 1),
            NgramCount("escasa", 1),
        ]

    def test_respects_top(self):
        result = top_ngrams(["agua potable escasa", "agua potable"], n=2, top=2)
        assert [gram.term for gram in result] == ["agua", "agua potable"]

    def test_discards_grams_shorter_than_four_characters(self):
        terms = [gram.term for gram in top_ngrams(["sol brillante"], n=2)]
        assert "sol" not in terms
        assert terms == ["sol brillante", "brillante"]

    def test_grams_do_not_span_texts(self):
        terms = [gram.term for gram in top_ngrams(["agua", "potable"], n=2)]
        assert "agua potable" not in terms

    def test_counts_are_non_increasing(self, interview_documents):
        result = top_ngrams([doc.text for doc in interview_documents], n=3, top=60)
        assert len(result) <= 60
        counts = [gram.count for gram in result]
        assert counts == sorted(counts, reverse=True)

    def test_accepts_single_string(self):
        assert top_ngrams("agua potable", n=1) == [NgramCount("agua", 1), NgramCount("potable", 1)]

    def test_empty_input(self):
        assert top_ngrams([], n=3, top=5) == []
