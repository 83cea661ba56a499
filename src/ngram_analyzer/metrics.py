"""
Metric derivation for n-grams and page structure.

This module computes:
- Density and share for every n-gram phrase
- Sentence statistics from the original (unnormalized) text
- Paragraph, heading and emphasis statistics from the structural context
- Internal/external link classification
"""

import re
from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional
from urllib.parse import urlparse

from .models import NGramRecord, SeoMetrics, StructuralContext
from .text_processing import count_words

# Sentence terminators; consecutive ones ("?!", "...") form a single break
_SENTENCE_BREAK = re.compile(r"[.!?]+")

_INTERNAL_PREFIXES = ("/", "#", "?")
_ABSOLUTE_PREFIXES = ("http://", "https://")

# Code points a browser URL parser refuses in a hostname
_FORBIDDEN_HOST_CHARS = re.compile(r"[\x00-\x20\x7f#/:<>?@\[\\\]^|]")


def calculate_ngram_metrics(
    tables: dict[int, Counter],
    total_words: int,
) -> dict[int, list[NGramRecord]]:
    """
    Convert raw n-gram counts into sorted frequency records.

    Density and share always use total_words as the denominator, whatever
    the order. Records are sorted by count descending; the sort is stable,
    so equal counts keep the order in which phrases first appeared.

    Args:
        tables: Counter per n-gram order.
        total_words: Number of tokens in the analyzed text.

    Returns:
        Sorted records per n-gram order.
    """
    metrics: dict[int, list[NGramRecord]] = {}

    for size, counts in tables.items():
        records = [
            NGramRecord(
                phrase=phrase,
                count=count,
                density=_ratio(count, total_words, scale=100, digits=2),
                share=_ratio(count, total_words, scale=1, digits=4),
            )
            for phrase, count in counts.items()
        ]
        records.sort(key=lambda record: record.count, reverse=True)
        metrics[size] = records

    return metrics


def _round_half_up(value: float, digits: int) -> float:
    """Round to a fixed number of decimals with halves rounded away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _ratio(count: int, total: int, scale: int, digits: int) -> float:
    """Scaled, rounded ratio that is 0 for an empty denominator."""
    if total <= 0:
        return 0.0
    return _round_half_up(count / total * scale, digits)


def split_sentences(text: str) -> list[str]:
    """
    Split original text into sentences.

    Splits on runs of '.', '!' and '?' and discards whitespace-only
    segments.
    """
    return [segment for segment in _SENTENCE_BREAK.split(text) if segment.strip()]


def _average(lengths: list[int]) -> float:
    if not lengths:
        return 0
    return _round_half_up(sum(lengths) / len(lengths), 2)


def classify_link(href: str, hostname: str) -> Optional[str]:
    """
    Classify a link as internal or external to the current page.

    Rules, in order:
    - "/", "#" or "?" prefixed hrefs are internal
    - http(s) URLs are internal when their hostname matches, else external
    - an absolute URL that cannot be parsed counts as internal
    - anything else is a relative path and counts as internal

    Args:
        href: Raw href attribute value.
        hostname: Hostname of the page the link appears on.

    Returns:
        "internal", "external", or None for an empty href.
    """
    if not href:
        return None

    if href.startswith(_INTERNAL_PREFIXES):
        return "internal"

    if href.startswith(_ABSOLUTE_PREFIXES):
        try:
            parsed = urlparse(href)
            link_host = parsed.hostname
            # Raises for a non-numeric or out-of-range port
            parsed.port
        except ValueError:
            return "internal"
        if not _is_valid_host(parsed.netloc, link_host):
            return "internal"
        if link_host == (hostname or "").lower():
            return "internal"
        return "external"

    return "internal"


def _is_valid_host(netloc: str, host: Optional[str]) -> bool:
    """Check a parsed hostname the way a browser URL parser would."""
    if not host:
        return False
    if "[" in netloc:
        # IPv6 literal, already validated by urlparse
        return True
    return _FORBIDDEN_HOST_CHARS.search(host) is None


def calculate_seo_metrics(
    original_text: str,
    tokens: list[str],
    context: StructuralContext,
) -> SeoMetrics:
    """
    Aggregate SEO statistics for a page.

    Sentence statistics come from the original text. Paragraph, heading,
    emphasis and link statistics come entirely from the structural
    context.

    Args:
        original_text: Raw visible text before normalization.
        tokens: Normalized tokens of the same text.
        context: Caller-supplied page structure.

    Returns:
        SeoMetrics with every field populated (zeros for empty input).
    """
    sentence_lengths = [count_words(sentence) for sentence in split_sentences(original_text)]

    paragraphs = [text for text in context.paragraph_texts if text and text.strip()]
    paragraph_lengths = [count_words(text) for text in paragraphs]

    internal_links = 0
    external_links = 0
    for href in context.link_hrefs:
        kind = classify_link(href, context.hostname)
        if kind == "internal":
            internal_links += 1
        elif kind == "external":
            external_links += 1

    return SeoMetrics(
        total_words=len(tokens),
        total_sentences=len(sentence_lengths),
        avg_sentence_length=_average(sentence_lengths),
        sentence_lengths=sentence_lengths,
        total_paragraphs=len(paragraph_lengths),
        avg_paragraph_length=_average(paragraph_lengths),
        paragraph_lengths=paragraph_lengths,
        h1_count=context.h1_count,
        h2_count=context.h2_count,
        h3_count=context.h3_count,
        strong_count=context.strong_count,
        total_links=len(context.link_hrefs),
        internal_links=internal_links,
        external_links=external_links,
    )
