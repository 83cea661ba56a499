# -*- coding: utf-8 -*-
"""
Centralized configuration for the N-Gram SEO Analyzer.

Analysis thresholds are fixed policy constants. They are exposed here by
name so callers can read the defaults, but the issue detector always
applies these values.

Outer layers (page fetching, CLI and API rendering) are tuned through
the AnalyzerConfig dataclass, which can also be populated from the
environment.
"""

import os
from dataclasses import dataclass


# N-gram orders computed for every analysis
NGRAM_SIZES = (1, 2, 3, 4, 5)

# Issue thresholds
KEYWORD_STUFFING_DENSITY = 5.0  # Percent; strictly greater is flagged
LONG_SENTENCE_WORDS = 25  # Words; strictly greater is flagged
LONG_PARAGRAPH_WORDS = 120  # Words; strictly greater is flagged

# Presentation defaults
DISPLAY_LIMIT = 50  # Rows shown per n-gram table before "show all"
ALERT_PHRASE_LIMIT = 3  # Stuffed phrases quoted in the warning alert

# Fetching defaults
REQUEST_TIMEOUT = 30  # Seconds
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass
class AnalyzerConfig:
    """
    Configuration for the layers around the analysis core.

    Attributes:
        request_timeout: Seconds to wait for a page fetch before giving up.
        display_limit: Maximum rows rendered per n-gram table. Zero or a
            negative value means "show all".
        user_agent: User-Agent header sent when fetching pages.
    """

    request_timeout: int = REQUEST_TIMEOUT
    display_limit: int = DISPLAY_LIMIT
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def shows_all_rows(self) -> bool:
        """Check if tables should render every row."""
        return self.display_limit <= 0

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """
        Build a configuration from environment variables.

        Recognized variables:
            NGRAM_ANALYZER_TIMEOUT: request timeout in seconds.
            NGRAM_ANALYZER_DISPLAY_LIMIT: rows per n-gram table.
            NGRAM_ANALYZER_USER_AGENT: User-Agent header for fetches.

        Unset or unparsable numeric values fall back to the defaults.
        """
        return cls(
            request_timeout=_env_int("NGRAM_ANALYZER_TIMEOUT", REQUEST_TIMEOUT),
            display_limit=_env_int("NGRAM_ANALYZER_DISPLAY_LIMIT", DISPLAY_LIMIT),
            user_agent=os.environ.get("NGRAM_ANALYZER_USER_AGENT") or DEFAULT_USER_AGENT,
        )


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to default."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default
