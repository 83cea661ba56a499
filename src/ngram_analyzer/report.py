"""
Presentation helpers for analysis results.

Builds the alert messages shown above the results and sorts n-gram
records for table views. Sort state is an explicit SortState value held
by whichever view renders the table.
"""

from .config import ALERT_PHRASE_LIMIT, LONG_PARAGRAPH_WORDS, LONG_SENTENCE_WORDS
from .models import Alert, IssueReport, NGramRecord, SortState

NGRAM_LABELS = {
    1: "1-Gram (Single Words)",
    2: "2-Gram (Two-Word Phrases)",
    3: "3-Gram (Three-Word Phrases)",
    4: "4-Gram (Four-Word Phrases)",
    5: "5-Gram (Five-Word Phrases)",
}


def ngram_label(size: int) -> str:
    """Get the table title for an n-gram order."""
    return NGRAM_LABELS.get(size, f"{size}-Gram")


def format_density(value: float) -> str:
    """Render a density without a trailing '.0' for whole numbers (50, 6.25)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count > 1 else ''}"


def build_alerts(issues: IssueReport) -> list[Alert]:
    """
    Turn an issue report into user-facing alerts.

    Keyword stuffing yields one warning quoting the first few stuffed
    phrases; long sentences and long paragraphs yield one info alert each.
    """
    alerts = []

    if issues.keyword_stuffing:
        phrases = ", ".join(
            f'"{item.phrase}" ({format_density(item.density)}%)'
            for item in issues.keyword_stuffing[:ALERT_PHRASE_LIMIT]
        )
        alerts.append(Alert(level="warning", message=f"Keyword Stuffing Detected: {phrases}"))

    if issues.long_sentences > 0:
        alerts.append(Alert(
            level="info",
            message=f"{_plural(issues.long_sentences, 'sentence')} exceed {LONG_SENTENCE_WORDS} words",
        ))

    if issues.long_paragraphs > 0:
        alerts.append(Alert(
            level="info",
            message=f"{_plural(issues.long_paragraphs, 'paragraph')} exceed {LONG_PARAGRAPH_WORDS} words",
        ))

    return alerts


def sort_records(records: list[NGramRecord], state: SortState) -> list[NGramRecord]:
    """
    Return records ordered for display.

    Phrases compare case-insensitively. The sort is stable, so rows with
    equal keys keep their analysis order. A state without a column
    returns the records unchanged.
    """
    if state.column is None:
        return list(records)

    if state.column == "phrase":
        key = lambda record: record.phrase.lower()
    else:
        key = lambda record: getattr(record, state.column)

    return sorted(records, key=key, reverse=not state.ascending)


def limit_records(records: list[NGramRecord], limit: int) -> list[NGramRecord]:
    """Truncate to the display limit; a limit of zero or less keeps all rows."""
    if limit <= 0:
        return list(records)
    return list(records[:limit])
