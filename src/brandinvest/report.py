"""CLI runner for brand investment reports.

Run via: python -m brandinvest.report
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .analysis import BrandRanker
from .config import config
from .errors import RegistryError
from .models.brand import BrandPerformance
from .seed import load_sample_data
from .storage import BrandRegistry

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _pct(value: Optional[int]) -> str:
    if value is None:
        return "N/A"
    color = "green" if value > 0 else "red" if value < 0 else "dim"
    return f"[{color}]{value}%[/{color}]"


def build_table(performances: list[BrandPerformance], current_year: int) -> Table:
    """Build a Rich table of brand performance rows."""
    table = Table(
        title=f"Brand investments ({current_year})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Brand")
    table.add_column("Initial", justify="right")
    table.add_column("Current", justify="right")
    table.add_column("Bought", justify="right")
    table.add_column("ROI", justify="right")
    table.add_column("Annual", justify="right")

    for perf in performances:
        table.add_row(
            perf.name,
            f"{perf.initial_value:,}",
            f"{perf.current_value:,}",
            str(perf.purchase_year),
            _pct(perf.roi),
            _pct(perf.annual_appreciation),
        )
    return table


def run_report(
    registry: BrandRegistry,
    sort: str = "insertion",
) -> list[BrandPerformance]:
    """Print the performance table and best investment for a registry.

    Args:
        registry: Registry to report on
        sort: Row order: "insertion", "roi" or "appreciation"

    Returns:
        The performance rows in printed order
    """
    ranker = BrandRanker(registry)
    if sort == "roi":
        rows = ranker.rank_by_roi()
    elif sort == "appreciation":
        rows = ranker.rank_by_annual_appreciation()
    else:
        rows = ranker.analyze_all()

    if not rows:
        console.print("[yellow]No brands registered.[/yellow]")
    else:
        console.print(build_table(rows, registry.get_current_year()))

    best = ranker.find_best_investment()
    console.print()
    if best.best_name is None:
        console.print("[bold]Best investment:[/bold] none with a positive ROI")
    else:
        console.print(f"[bold]Best investment:[/bold] {best.best_name} ({best.best_roi}% ROI)")
    return rows


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Brand investment report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m brandinvest.report
  python -m brandinvest.report --year 2025 --sort roi
        """,
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Current year used for annual appreciation",
    )
    parser.add_argument(
        "--sort",
        choices=["insertion", "roi", "appreciation"],
        default="insertion",
        help="Row order (default: insertion)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    registry = BrandRegistry()
    try:
        load_sample_data(registry)
        if args.year is not None:
            registry.set_current_year(registry.owner, args.year)
        run_report(registry, sort=args.sort)
    except (RegistryError, ValueError) as e:
        logger.error(f"Report failed: {e}")
        if args.verbose:
            raise
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
