"""
Data models for the N-Gram SEO Analyzer.

This module defines the data structures passed between the analysis
stages and returned to callers. Every model offers a to_dict() that
produces the camelCase result shape consumed by rendering and export
layers.
"""

from dataclasses import dataclass, field
from typing import Literal, Optional


@dataclass(frozen=True)
class NGramRecord:
    """Frequency statistics for one distinct phrase of a given order."""
    phrase: str
    count: int
    density: float  # Percent of total words, 2 decimals
    share: float  # Fraction of total words, 4 decimals

    def to_dict(self) -> dict:
        return {
            "phrase": self.phrase,
            "count": self.count,
            "density": self.density,
            "share": self.share,
        }


@dataclass
class StructuralContext:
    """
    Page-structure snapshot supplied by the caller.

    These values cannot be derived from the analyzed text alone, so they
    come from whatever extracted the text (an HTML parser, a Word
    document reader, an API client). The analysis never modifies them.
    """
    paragraph_texts: list[str] = field(default_factory=list)
    h1_count: int = 0
    h2_count: int = 0
    h3_count: int = 0
    strong_count: int = 0
    link_hrefs: list[str] = field(default_factory=list)
    hostname: str = ""

    def to_dict(self) -> dict:
        return {
            "paragraphTexts": list(self.paragraph_texts),
            "h1Count": self.h1_count,
            "h2Count": self.h2_count,
            "h3Count": self.h3_count,
            "strongCount": self.strong_count,
            "linkHrefs": list(self.link_hrefs),
            "hostname": self.hostname,
        }


@dataclass
class SeoMetrics:
    """Aggregate structural statistics for an analyzed page."""
    total_words: int = 0
    total_sentences: int = 0
    avg_sentence_length: float = 0
    sentence_lengths: list[int] = field(default_factory=list)
    total_paragraphs: int = 0
    avg_paragraph_length: float = 0
    paragraph_lengths: list[int] = field(default_factory=list)
    h1_count: int = 0
    h2_count: int = 0
    h3_count: int = 0
    strong_count: int = 0
    total_links: int = 0
    internal_links: int = 0
    external_links: int = 0

    def to_dict(self) -> dict:
        return {
            "totalWords": self.total_words,
            "totalSentences": self.total_sentences,
            "avgSentenceLength": self.avg_sentence_length,
            "sentenceLengths": list(self.sentence_lengths),
            "totalParagraphs": self.total_paragraphs,
            "avgParagraphLength": self.avg_paragraph_length,
            "paragraphLengths": list(self.paragraph_lengths),
            "h1Count": self.h1_count,
            "h2Count": self.h2_count,
            "h3Count": self.h3_count,
            "strongCount": self.strong_count,
            "totalLinks": self.total_links,
            "internalLinks": self.internal_links,
            "externalLinks": self.external_links,
        }


@dataclass(frozen=True)
class KeywordStuffingIssue:
    """A phrase whose density crosses the keyword stuffing threshold."""
    phrase: str
    density: float
    size: str  # N-gram order as a string, e.g. "2"

    def to_dict(self) -> dict:
        return {"phrase": self.phrase, "density": self.density, "size": self.size}


@dataclass
class IssueReport:
    """Quality findings derived from n-gram and SEO metrics."""
    keyword_stuffing: list[KeywordStuffingIssue] = field(default_factory=list)
    long_sentences: int = 0
    long_paragraphs: int = 0

    @property
    def has_issues(self) -> bool:
        """Check if any rule was triggered."""
        return bool(self.keyword_stuffing) or self.long_sentences > 0 or self.long_paragraphs > 0

    def to_dict(self) -> dict:
        return {
            "keywordStuffing": [item.to_dict() for item in self.keyword_stuffing],
            "longSentences": self.long_sentences,
            "longParagraphs": self.long_paragraphs,
        }


@dataclass
class AnalysisResult:
    """Complete output of a single analyze() call."""
    ngram_metrics: dict[int, list[NGramRecord]]
    seo_metrics: SeoMetrics
    issues: IssueReport
    total_words: int

    def records_for(self, size: int) -> list[NGramRecord]:
        """Get the sorted records for one n-gram order (empty if absent)."""
        return self.ngram_metrics.get(size, [])

    def to_dict(self) -> dict:
        return {
            "nGramMetrics": {
                str(size): [record.to_dict() for record in records]
                for size, records in self.ngram_metrics.items()
            },
            "seoMetrics": self.seo_metrics.to_dict(),
            "issues": self.issues.to_dict(),
            "totalWords": self.total_words,
        }


SortColumn = Literal["phrase", "count", "density"]


@dataclass(frozen=True)
class SortState:
    """
    Sort settings for one rendered n-gram table.

    Owned by the rendering layer and passed explicitly to sort_records().
    A fresh state has no column, meaning "keep the analysis order".
    """
    column: Optional[SortColumn] = None
    ascending: bool = True

    def toggle(self, column: SortColumn) -> "SortState":
        """
        Return the state after the user clicks a column header.

        Clicking the active column flips the direction. A new column
        starts descending, except phrase, which starts ascending.
        """
        if column == self.column:
            return SortState(column=column, ascending=not self.ascending)
        return SortState(column=column, ascending=(column == "phrase"))


@dataclass(frozen=True)
class Alert:
    """A user-facing message summarizing an issue."""
    level: Literal["warning", "info"]
    message: str

    def to_dict(self) -> dict:
        return {"type": self.level, "message": self.message}


@dataclass
class PageContent:
    """Raw visible text plus structural context extracted from a source."""
    text: str
    context: StructuralContext = field(default_factory=StructuralContext)
    source: Optional[str] = None

    @property
    def word_count(self) -> int:
        """Approximate word count of the raw text."""
        return len(self.text.split())
