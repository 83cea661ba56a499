"""
CSV export of n-gram metrics.

Produces one row per (n-gram order, phrase) with every field quoted and
embedded quotes doubled.
"""

import csv
import time
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .models import AnalysisResult
from .report import format_density

EXPORT_COLUMNS = ["N-Gram Size", "Phrase", "Count", "Density (%)"]


def ngram_metrics_to_dataframe(result: AnalysisResult) -> pd.DataFrame:
    """
    Flatten n-gram metrics into a table.

    Orders are emitted in ascending order; records within an order keep
    the result's (count descending) order.
    """
    rows = [
        [f"{size}-gram", record.phrase, record.count, record.density]
        for size in sorted(result.ngram_metrics)
        for record in result.ngram_metrics[size]
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_to_csv(
    result: AnalysisResult,
    path: Optional[Union[str, Path]] = None,
) -> str:
    """
    Serialize n-gram metrics as CSV.

    Args:
        result: Analysis result to export.
        path: Optional file path to write the CSV to.

    Returns:
        The CSV text.
    """
    df = ngram_metrics_to_dataframe(result)
    # Whole-number densities are written as "50", not "50.0"
    df["Density (%)"] = df["Density (%)"].map(format_density)
    csv_text = df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")

    if path is not None:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(csv_text, encoding="utf-8")

    return csv_text


def default_export_filename() -> str:
    """Timestamped filename for a download."""
    return f"ngram-analysis-{int(time.time() * 1000)}.csv"
