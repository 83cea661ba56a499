"""
Command-line interface for the N-Gram SEO Analyzer.

Analyzes a URL, a saved page, a Word document or literal text and
renders alerts, page statistics and n-gram tables in the terminal.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .analysis import analyze
from .config import NGRAM_SIZES, AnalyzerConfig
from .content_sources import ContentExtractionError, load_content
from .export import export_to_csv
from .models import AnalysisResult, PageContent, SeoMetrics, SortState, StructuralContext
from .report import build_alerts, format_density, limit_records, ngram_label, sort_records

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.command()
@click.argument("source", required=False)
@click.option(
    "--text",
    "-t",
    type=str,
    help="Analyze this literal text instead of a URL or file.",
)
@click.option(
    "--hostname",
    type=str,
    default=None,
    help="Hostname treated as internal when classifying links in local files.",
)
@click.option(
    "--size",
    "-n",
    "sizes",
    type=click.IntRange(min(NGRAM_SIZES), max(NGRAM_SIZES)),
    multiple=True,
    help="N-gram order to display (repeatable, default: all).",
)
@click.option(
    "--limit",
    "-l",
    type=int,
    default=None,
    help="Rows per n-gram table (default: 50, 0 shows all).",
)
@click.option(
    "--sort-by",
    type=click.Choice(["count", "phrase", "density"]),
    default=None,
    help="Column to sort n-gram tables by.",
)
@click.option(
    "--reverse",
    is_flag=True,
    default=False,
    help="Reverse the default direction of --sort-by.",
)
@click.option(
    "--export",
    "export_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write n-gram metrics to this CSV file.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the raw analysis result as JSON.",
)
@click.option(
    "--timeout",
    type=int,
    default=None,
    help="Request timeout in seconds for URLs (default: 30).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(
    source: Optional[str],
    text: Optional[str],
    hostname: Optional[str],
    sizes: tuple[int, ...],
    limit: Optional[int],
    sort_by: Optional[str],
    reverse: bool,
    export_path: Optional[Path],
    as_json: bool,
    timeout: Optional[int],
    verbose: bool,
) -> None:
    """
    N-Gram SEO Analyzer - n-gram frequencies and on-page SEO checks.

    SOURCE is a URL or a path to a .html, .docx or .txt file.

    Examples:

        ngram-analyze https://example.com/page

        ngram-analyze page.html --hostname example.com -n 2 -n 3 --export out.csv

        ngram-analyze --text "cat dog cat" --json
    """
    _configure_logging(verbose)
    config = AnalyzerConfig.from_env()
    if limit is not None:
        config.display_limit = limit
    if timeout is not None:
        config.request_timeout = timeout

    if not source and text is None:
        console.print("[red]Error:[/red] Must provide either SOURCE or --text")
        sys.exit(1)

    if source and text is not None:
        console.print("[red]Error:[/red] Provide only one of SOURCE or --text")
        sys.exit(1)

    try:
        if text is not None:
            page = PageContent(text=text, context=StructuralContext(hostname=hostname or ""))
        else:
            with console.status("[bold green]Loading content..."):
                page = load_content(
                    source,
                    hostname=hostname,
                    timeout=config.request_timeout,
                    user_agent=config.user_agent,
                )
            if verbose:
                console.print(f"  Loaded content from: {source}")
                console.print(f"  Word count: ~{page.word_count}")

        result = analyze(page.text, page.context)

        if export_path is not None:
            export_to_csv(result, export_path)

        if as_json:
            click.echo(json.dumps(result.to_dict(), indent=2))
        else:
            state = SortState()
            if sort_by:
                state = state.toggle(sort_by)
                if reverse:
                    state = state.toggle(sort_by)
            _display_result(result, sizes or NGRAM_SIZES, state, config)

        if export_path is not None and not as_json:
            console.print(f"\n[bold green]Exported![/bold green] CSV saved to: {export_path}")

    except ContentExtractionError as e:
        console.print(f"[red]Content extraction error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)


def _display_result(
    result: AnalysisResult,
    sizes,
    state: SortState,
    config: AnalyzerConfig,
) -> None:
    """Render alerts, summary and n-gram tables."""
    if result.issues.has_issues:
        for alert in build_alerts(result.issues):
            style = "yellow" if alert.level == "warning" else "cyan"
            console.print(Panel.fit(alert.message, border_style=style))
    else:
        console.print("[green]No SEO issues detected[/green]")

    _display_summary(result.seo_metrics)

    for size in sizes:
        _display_ngram_table(size, result.records_for(size), state, config)


def _display_summary(metrics: SeoMetrics) -> None:
    """Display page statistics."""
    table = Table(title="Page Summary", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Total Words", f"{metrics.total_words:,}")
    table.add_row("Sentences", f"{metrics.total_sentences:,}")
    table.add_row("Avg Sentence Length", f"{metrics.avg_sentence_length} words")
    table.add_row("Paragraphs", f"{metrics.total_paragraphs:,}")
    table.add_row("Avg Paragraph Length", f"{metrics.avg_paragraph_length} words")
    table.add_row("Internal Links", f"{metrics.internal_links:,}")
    table.add_row("External Links", f"{metrics.external_links:,}")
    table.add_row("Total Links", f"{metrics.total_links:,}")
    table.add_row("H1 Tags", f"{metrics.h1_count:,}")
    table.add_row("H2 Tags", f"{metrics.h2_count:,}")
    table.add_row("H3 Tags", f"{metrics.h3_count:,}")
    table.add_row("Strong/Bold", f"{metrics.strong_count:,}")

    console.print(table)


def _display_ngram_table(size: int, records, state: SortState, config: AnalyzerConfig) -> None:
    """Display one n-gram table."""
    title = f"{ngram_label(size)} - {len(records)} unique phrases"
    if not records:
        console.print(f"\n[bold]{title}[/bold]\n[dim]No data available[/dim]")
        return

    rows = sort_records(records, state)
    if not config.shows_all_rows:
        rows = limit_records(rows, config.display_limit)

    table = Table(title=title, show_header=True)
    table.add_column("Phrase", style="green")
    table.add_column("Count", justify="right")
    table.add_column("Density (%)", justify="right")

    for record in rows:
        table.add_row(record.phrase, f"{record.count:,}", f"{format_density(record.density)}%")

    console.print(table)
    if len(rows) < len(records):
        console.print(f"[dim]Showing {len(rows)} of {len(records)} phrases (use --limit 0 to show all)[/dim]")


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
