"""
N-Gram SEO Analyzer

A text-analytics tool that:
- Computes 1- to 5-gram frequency, density and share for page text
- Derives sentence, paragraph, heading and link statistics
- Flags keyword stuffing and overlong sentences/paragraphs
- Exports n-gram tables to CSV
"""

__version__ = "1.0.0"
__author__ = "N-Gram SEO Analyzer Team"

from .analysis import analyze

from .config import (
    AnalyzerConfig,
    KEYWORD_STUFFING_DENSITY,
    LONG_PARAGRAPH_WORDS,
    LONG_SENTENCE_WORDS,
    NGRAM_SIZES,
)

from .models import (
    Alert,
    AnalysisResult,
    IssueReport,
    KeywordStuffingIssue,
    NGramRecord,
    PageContent,
    SeoMetrics,
    SortState,
    StructuralContext,
)

from .text_processing import normalize_text, tokenize
from .ngrams import count_ngrams, generate_ngrams
from .metrics import (
    calculate_ngram_metrics,
    calculate_seo_metrics,
    classify_link,
    split_sentences,
)
from .issues import detect_issues

# Page extraction
from .content_sources import (
    ContentExtractionError,
    extract_page_content,
    fetch_url_content,
    load_content,
    load_docx_content,
)

# Presentation and export
from .report import build_alerts, sort_records
from .export import export_to_csv, ngram_metrics_to_dataframe

__all__ = [
    # Core
    "analyze",
    "normalize_text",
    "tokenize",
    "generate_ngrams",
    "count_ngrams",
    "calculate_ngram_metrics",
    "calculate_seo_metrics",
    "classify_link",
    "split_sentences",
    "detect_issues",
    # Configuration
    "AnalyzerConfig",
    "KEYWORD_STUFFING_DENSITY",
    "LONG_PARAGRAPH_WORDS",
    "LONG_SENTENCE_WORDS",
    "NGRAM_SIZES",
    # Models
    "Alert",
    "AnalysisResult",
    "IssueReport",
    "KeywordStuffingIssue",
    "NGramRecord",
    "PageContent",
    "SeoMetrics",
    "SortState",
    "StructuralContext",
    # Page extraction
    "ContentExtractionError",
    "extract_page_content",
    "fetch_url_content",
    "load_content",
    "load_docx_content",
    # Presentation and export
    "build_alerts",
    "sort_records",
    "export_to_csv",
    "ngram_metrics_to_dataframe",
]
