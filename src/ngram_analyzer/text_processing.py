"""
Text normalization and tokenization.

Turns raw page text into the canonical token stream used for n-gram
counting: lowercase words made of ASCII letters, digits, hyphens and
apostrophes.
"""

import re

# Anything outside these characters becomes a word boundary
_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s'\-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Normalize text to its canonical form.

    Lowercases, replaces every character that is not alphanumeric,
    whitespace, hyphen or apostrophe with a space, collapses whitespace
    runs and trims the result.

    Args:
        text: Raw visible text.

    Returns:
        Normalized text ("" for empty input).
    """
    if not text:
        return ""

    result = text.lower()
    result = _DISALLOWED_CHARS.sub(" ", result)
    result = _WHITESPACE_RUN.sub(" ", result)
    return result.strip()


def tokenize(text: str) -> list[str]:
    """Split normalized text into words, dropping empty pieces."""
    return [word for word in _WHITESPACE_RUN.split(text) if word]


def count_words(text: str) -> int:
    """Count whitespace-separated words in raw (unnormalized) text."""
    return len(text.split())
