"""Tests for quality issue detection."""

from ngram_analyzer.issues import detect_issues, find_keyword_stuffing
from ngram_analyzer.models import NGramRecord, SeoMetrics


def _record(phrase: str, density: float, count: int = 1) -> NGramRecord:
    return NGramRecord(phrase=phrase, count=count, density=density, share=round(density / 100, 4))


class TestKeywordStuffing:
    """Tests for density-based stuffing detection."""

    def test_flags_density_above_threshold(self):
        """Test that a bigram at 6.2% is flagged with its order as a string."""
        metrics = {2: [_record("buy now", 6.2, count=31)]}

        flagged = find_keyword_stuffing(metrics)

        assert len(flagged) == 1
        assert flagged[0].phrase == "buy now"
        assert flagged[0].density == 6.2
        assert flagged[0].size == "2"

    def test_threshold_is_strict(self):
        """Test that exactly 5% is not flagged."""
        metrics = {1: [_record("coffee", 5.0), _record("beans", 5.01)]}

        flagged = find_keyword_stuffing(metrics)

        assert [item.phrase for item in flagged] == ["beans"]

    def test_not_deduplicated_across_orders(self):
        """Test that every order contributes its own findings."""
        metrics = {
            1: [_record("cat", 100.0)],
            2: [_record("cat cat", 90.0)],
            3: [_record("cat cat cat", 80.0)],
        }

        flagged = find_keyword_stuffing(metrics)

        assert [item.size for item in flagged] == ["1", "2", "3"]


class TestDetectIssues:
    """Tests for the combined issue report."""

    def test_counts_long_sentences_and_paragraphs(self):
        """Test that only lengths strictly above the limits are counted."""
        seo = SeoMetrics(
            sentence_lengths=[26, 25, 30, 3],
            paragraph_lengths=[121, 120, 10],
        )

        report = detect_issues({}, seo)

        assert report.long_sentences == 2
        assert report.long_paragraphs == 1
        assert report.keyword_stuffing == []
        assert report.has_issues is True

    def test_empty_metrics(self):
        """Test that empty inputs produce an empty report."""
        report = detect_issues({n: [] for n in range(1, 6)}, SeoMetrics())

        assert report.keyword_stuffing == []
        assert report.long_sentences == 0
        assert report.long_paragraphs == 0
        assert report.has_issues is False

    def test_to_dict_shape(self):
        """Test the camelCase serialization."""
        report = detect_issues({2: [_record("buy now", 6.2)]}, SeoMetrics(sentence_lengths=[40]))

        assert report.to_dict() == {
            "keywordStuffing": [{"phrase": "buy now", "density": 6.2, "size": "2"}],
            "longSentences": 1,
            "longParagraphs": 0,
        }
