"""Tests for the analyze() pipeline."""

import copy

import pytest

from ngram_analyzer.analysis import analyze
from ngram_analyzer.models import AnalysisResult, NGramRecord, StructuralContext


SAMPLE_TEXT = (
    "Fresh coffee beans make fresh coffee. Grind fresh coffee beans daily! "
    "Do you store coffee beans in the freezer? Store them in a dry, dark place."
)


class TestAnalyzeExamples:
    """Tests for small, fully worked examples."""

    def test_cat_dog_cat(self):
        """Test the canonical three-token example."""
        result = analyze("cat dog cat", StructuralContext())

        assert isinstance(result, AnalysisResult)
        assert result.total_words == 3
        assert result.records_for(1) == [
            NGramRecord(phrase="cat", count=2, density=66.67, share=0.6667),
            NGramRecord(phrase="dog", count=1, density=33.33, share=0.3333),
        ]
        assert {record.phrase: record.count for record in result.records_for(2)} == {
            "cat dog": 1,
            "dog cat": 1,
        }
        assert [record.phrase for record in result.records_for(3)] == ["cat dog cat"]
        assert result.records_for(4) == []
        assert result.records_for(5) == []

    def test_empty_text(self):
        """Test that empty text produces zeros and empty tables."""
        result = analyze("", StructuralContext())

        assert result.total_words == 0
        assert sorted(result.ngram_metrics) == [1, 2, 3, 4, 5]
        assert all(records == [] for records in result.ngram_metrics.values())
        assert result.seo_metrics.avg_sentence_length == 0
        assert result.seo_metrics.avg_paragraph_length == 0
        assert result.issues.keyword_stuffing == []
        assert result.issues.long_sentences == 0

    def test_context_defaults_to_empty(self):
        """Test that the structural context is optional."""
        result = analyze("Just some words.")

        assert result.seo_metrics.total_paragraphs == 0
        assert result.seo_metrics.total_links == 0
        assert result.seo_metrics.total_sentences == 1

    def test_total_words_matches_seo_metrics(self):
        result = analyze(SAMPLE_TEXT)
        assert result.total_words == result.seo_metrics.total_words


class TestAnalyzeProperties:
    """Tests for invariants that hold for any input."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
    def test_window_sum_per_order(self, n):
        """Test that counts per order sum to total_words - n + 1."""
        result = analyze(SAMPLE_TEXT)

        total = sum(record.count for record in result.records_for(n))

        assert total == result.total_words - n + 1

    def test_density_and_share_tolerance(self):
        """Test that rounded values stay within rounding tolerance."""
        result = analyze(SAMPLE_TEXT)

        for records in result.ngram_metrics.values():
            for record in records:
                exact = record.count / result.total_words
                assert abs(record.share - exact) <= 1e-4
                assert abs(record.density - 100 * exact) <= 1e-2

    def test_records_non_increasing_by_count(self):
        result = analyze(SAMPLE_TEXT)

        for records in result.ngram_metrics.values():
            counts = [record.count for record in records]
            assert counts == sorted(counts, reverse=True)

    def test_idempotent(self, sample_context: StructuralContext):
        """Test that identical inputs give identical results."""
        first = analyze(SAMPLE_TEXT, sample_context)
        second = analyze(SAMPLE_TEXT, sample_context)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_context_not_mutated(self, sample_context: StructuralContext):
        """Test that analysis leaves the context untouched."""
        before = copy.deepcopy(sample_context)
        analyze(SAMPLE_TEXT, sample_context)
        assert sample_context == before


class TestAnalyzeIssues:
    """Tests for issues surfaced through the full pipeline."""

    def test_stuffed_bigram_flagged(self, stuffed_bigram_text: str):
        """Test that a 6.2% bigram is reported with size "2"."""
        result = analyze(stuffed_bigram_text)

        assert result.total_words == 500
        bigram_issues = [item for item in result.issues.keyword_stuffing if item.size == "2"]
        assert len(bigram_issues) == 1
        assert bigram_issues[0].phrase == "buy now"
        assert bigram_issues[0].density == 6.2

    def test_repeated_word_flagged_at_every_order(self):
        """Test that stuffing findings are not deduplicated across orders."""
        result = analyze("cat " * 10)

        sizes = [item.size for item in result.issues.keyword_stuffing]
        assert sizes == ["1", "2", "3", "4", "5"]

    def test_long_sentence_count(self):
        """Test that only sentences over 25 words are counted."""
        sentences = []
        for i in range(30):
            length = 26 + i if i % 7 == 0 else 10
            sentences.append(" ".join(["word"] * length) + ".")
        text = " ".join(sentences)

        result = analyze(text)

        assert result.seo_metrics.total_sentences == 30
        assert result.issues.long_sentences == 5

    def test_long_paragraph_count(self):
        """Test that paragraph issues come from the structural context."""
        context = StructuralContext(paragraph_texts=["word " * 121, "word " * 120, "short one"])

        result = analyze("Short text.", context)

        assert result.issues.long_paragraphs == 1
        assert result.seo_metrics.total_paragraphs == 3


class TestAnalysisResultSerialization:
    """Tests for the camelCase result shape."""

    def test_to_dict_keys(self):
        data = analyze("cat dog cat").to_dict()

        assert set(data) == {"nGramMetrics", "seoMetrics", "issues", "totalWords"}
        assert set(data["nGramMetrics"]) == {"1", "2", "3", "4", "5"}
        assert data["nGramMetrics"]["1"][0] == {
            "phrase": "cat",
            "count": 2,
            "density": 66.67,
            "share": 0.6667,
        }
        assert data["seoMetrics"]["totalWords"] == 3
