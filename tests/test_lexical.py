"""Tests for lexical feature extraction."""

import pytest

from resume_match.analysis.lexical import (
    analyze_content,
    estimate_page_count,
    extract_quantifiable_results,
    find_action_verbs,
    get_context,
    readability_score,
    split_sentences,
    split_words,
)


class TestCounts:
    def test_empty_text(self):
        content = analyze_content("")
        assert content.word_count == 0
        assert content.sentence_count == 0
        assert content.character_count == 0
        assert content.page_count == 1
        assert content.average_words_per_sentence == 0.0
        assert content.action_verbs == []
        assert content.quantifiable_results == []

    def test_split_words_ignores_whitespace_runs(self):
        assert split_words("  one\ttwo\n\nthree   ") == ["one", "two", "three"]

    def test_split_sentences(self):
        assert len(split_sentences("One. Two! Three?")) == 3
        assert split_sentences("...!!") == []

    @pytest.mark.parametrize(
        "words, pages",
        [(0, 1), (250, 1), (251, 2), (500, 2), (501, 3)],
    )
    def test_page_count(self, words, pages):
        assert estimate_page_count(words) == pages

    def test_complex_words(self):
        content = analyze_content("extraordinary a big word")
        assert content.complex_words == 1

    def test_average_words_per_sentence_rounded(self):
        content = analyze_content("One two three. Four five. Six.")
        assert content.sentence_count == 3
        assert content.average_words_per_sentence == 2.0


class TestReadability:
    def test_short_sentences(self):
        # 206.835 - 1.015 * 10 - 84.6 * 1.5
        assert readability_score(10, 1) == 70

    def test_no_sentences(self):
        assert readability_score(0, 0) == 80

    def test_clamped_at_zero(self):
        assert readability_score(500, 1) == 0

    def test_never_above_100(self):
        assert readability_score(1, 100) <= 100


class TestActionVerbs:
    def test_case_insensitive(self):
        assert find_action_verbs("MANAGED the budget") == ["managed"]

    def test_whole_word_only(self):
        assert "led" not in find_action_verbs("Kept the ledger balanced")

    def test_vocabulary_order(self):
        verbs = find_action_verbs("Reduced costs and developed tools")
        assert verbs == ["developed", "reduced"]

    def test_custom_vocabulary(self):
        assert find_action_verbs("Led and built", ("built",)) == ["built"]


class TestQuantifiableResults:
    def test_short_profile(self, short_profile_text):
        results = extract_quantifiable_results(short_profile_text)
        assert results[0].text == "40%"
        assert results[0].type == "percentage"
        assert results[0].value == "40"
        numbers = [r.text for r in results if r.type == "number"]
        assert "10000" in numbers
        assert "40" not in numbers

    def test_currency_not_reported_as_number(self):
        results = extract_quantifiable_results("Saved $1,200.50 and grew revenue 15%")
        assert [r.type for r in results] == ["percentage", "currency"]
        assert results[1].text == "$1,200.50"

    def test_scaled_number(self):
        results = extract_quantifiable_results("Owned a budget of 5 million")
        assert results[0].text == "5 million"

    def test_capped_at_ten(self):
        text = " ".join(f"item {i}" for i in range(1, 16))
        results = extract_quantifiable_results(text)
        assert len(results) == 10
        assert results[0].text == "1"

    def test_context_window(self, short_profile_text):
        result = next(r for r in extract_quantifiable_results(short_profile_text) if r.text == "10000")
        assert "users" in result.context
        assert len(result.context) <= 100

    def test_get_context_trims(self):
        assert get_context("  abc  ", 3, 10) == "abc"


class TestAnalyzeContent:
    def test_short_profile(self, short_profile_text):
        content = analyze_content(short_profile_text)
        assert "developed" in content.action_verbs
        assert any(r.text == "40%" for r in content.quantifiable_results)
        assert any(r.type == "number" for r in content.quantifiable_results)

    def test_idempotent(self, sample_resume_text):
        assert analyze_content(sample_resume_text) == analyze_content(sample_resume_text)
