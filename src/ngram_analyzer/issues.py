"""
Threshold-based quality issue detection.

Flags:
- Keyword stuffing (any n-gram above the density threshold)
- Overlong sentences
- Overlong paragraphs

Thresholds are the fixed policy constants from config.
"""

from .config import KEYWORD_STUFFING_DENSITY, LONG_PARAGRAPH_WORDS, LONG_SENTENCE_WORDS
from .models import IssueReport, KeywordStuffingIssue, NGramRecord, SeoMetrics


def find_keyword_stuffing(
    ngram_metrics: dict[int, list[NGramRecord]],
) -> list[KeywordStuffingIssue]:
    """
    Collect every n-gram whose density exceeds the stuffing threshold.

    The same phrase text can be reported once per order it appears in;
    results are not deduplicated across orders.
    """
    flagged = []
    for size, records in ngram_metrics.items():
        for record in records:
            if record.density > KEYWORD_STUFFING_DENSITY:
                flagged.append(KeywordStuffingIssue(
                    phrase=record.phrase,
                    density=record.density,
                    size=str(size),
                ))
    return flagged


def detect_issues(
    ngram_metrics: dict[int, list[NGramRecord]],
    seo_metrics: SeoMetrics,
) -> IssueReport:
    """
    Apply the quality rules to computed metrics.

    Args:
        ngram_metrics: Sorted records per n-gram order.
        seo_metrics: Aggregate page statistics.

    Returns:
        IssueReport with stuffed phrases and long sentence/paragraph counts.
    """
    return IssueReport(
        keyword_stuffing=find_keyword_stuffing(ngram_metrics),
        long_sentences=sum(1 for n in seo_metrics.sentence_lengths if n > LONG_SENTENCE_WORDS),
        long_paragraphs=sum(1 for n in seo_metrics.paragraph_lengths if n > LONG_PARAGRAPH_WORDS),
    )
