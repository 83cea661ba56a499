"""
Content analysis entry point.

Runs the full pipeline for one page:
- Normalize and tokenize the raw text
- Count n-grams for every configured order
- Derive n-gram and SEO metrics
- Detect quality issues
"""

import logging
from typing import Optional

from .config import NGRAM_SIZES
from .issues import detect_issues
from .metrics import calculate_ngram_metrics, calculate_seo_metrics
from .models import AnalysisResult, StructuralContext
from .ngrams import count_ngrams
from .text_processing import normalize_text, tokenize

logger = logging.getLogger(__name__)


def analyze(
    raw_text: str,
    context: Optional[StructuralContext] = None,
) -> AnalysisResult:
    """
    Analyze page text and structure.

    The call is synchronous and has no side effects on its inputs; the
    same inputs always produce an equal result. Empty text, pages without
    paragraphs or links and texts shorter than the highest n-gram order
    all produce zero/empty values rather than errors.

    Args:
        raw_text: Visible page text with scripts, styles and hidden content
            already removed.
        context: Structural counts for the same page. Defaults to an empty
            context (no paragraphs, headings or links).

    Returns:
        AnalysisResult with n-gram metrics, SEO metrics and issues.
    """
    if context is None:
        context = StructuralContext()
    raw_text = raw_text or ""

    tokens = tokenize(normalize_text(raw_text))
    total_words = len(tokens)

    tables = count_ngrams(tokens, NGRAM_SIZES)
    ngram_metrics = calculate_ngram_metrics(tables, total_words)
    seo_metrics = calculate_seo_metrics(raw_text, tokens, context)
    issues = detect_issues(ngram_metrics, seo_metrics)

    logger.debug(
        f"Analyzed {total_words} words: "
        f"{sum(len(records) for records in ngram_metrics.values())} distinct phrases, "
        f"{len(issues.keyword_stuffing)} stuffed, "
        f"{issues.long_sentences} long sentences, {issues.long_paragraphs} long paragraphs"
    )

    return AnalysisResult(
        ngram_metrics=ngram_metrics,
        seo_metrics=seo_metrics,
        issues=issues,
        total_words=total_words,
    )
