"""
N-gram frequency counting.

Each order is counted independently over the same token sequence with a
sliding window; higher orders are never derived from lower ones.
"""

from collections import Counter
from typing import Iterable

from .config import NGRAM_SIZES


def generate_ngrams(tokens: list[str], n: int) -> Counter:
    """
    Count every contiguous n-token phrase in a token sequence.

    Args:
        tokens: Normalized tokens in document order.
        n: N-gram order (1 or greater).

    Returns:
        Counter mapping phrase (tokens joined by one space) to occurrences.
        Empty when there are fewer than n tokens.

    Raises:
        ValueError: If n is less than 1.
    """
    if n < 1:
        raise ValueError(f"N-gram order must be at least 1, got {n}")

    counts: Counter = Counter()
    if len(tokens) < n:
        return counts

    for i in range(len(tokens) - n + 1):
        counts[" ".join(tokens[i:i + n])] += 1

    return counts


def count_ngrams(
    tokens: list[str],
    sizes: Iterable[int] = NGRAM_SIZES,
) -> dict[int, Counter]:
    """Build one frequency table per requested order."""
    return {n: generate_ngrams(tokens, n) for n in sizes}
