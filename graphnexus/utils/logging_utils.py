import logging
import sys
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from ..core.constants import INFINITY
from ..core.models import iter_pairs


def setup_logging(
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
) -> None:
    """
    Setup basic logging configuration for the graphnexus package.
    
    Args:
        level: The logging level to use. Defaults to "INFO".
        log_format: Custom log format string. If None, uses default format.
        date_format: Custom date format string. If None, uses default format.
    """
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if date_format is None:
        date_format = "%Y-%m-%d %H:%M:%S"

    # Create a StreamHandler that writes to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=log_format, datefmt=date_format))

    # Get the root logger for the graphnexus package
    logger = logging.getLogger("graphnexus")
    logger.setLevel(level.upper())
    for existing in list(logger.handlers):
        if isinstance(existing, logging.StreamHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)

    # Prevent the logger from propagating messages to the root logger
    logger.propagate = False


def format_distance(distance: int) -> str:
    return "inf" if distance == INFINITY else str(distance)


def print_shortest_paths(
    source: str,
    distances: Dict[str, int],
    console: Optional[Console] = None,
    max_rows: Optional[int] = None,
) -> None:
    console = console or Console()
    console.print(f"Shortest paths from '{source}'", style="bold", markup=False)
    table = Table(show_header=True, header_style="bold white")
    table.add_column("Vertex", style="bright_yellow")
    table.add_column("Distance", style="bold cyan", justify="right")

    items = list(distances.items())
    for vertex, dist in items[:max_rows]:
        table.add_row(Text(vertex), format_distance(dist))
    console.print(table)
    if max_rows is not None and len(items) > max_rows:
        console.print(f"... (showing {max_rows} out of {len(items)} results)")


def print_mst(
    mst: Sequence[str],
    total_weight: Optional[int] = None,
    console: Optional[Console] = None,
    max_rows: Optional[int] = None,
) -> None:
    console = console or Console()
    # A lone vertex is encoded as a one-element sequence
    if len(mst) == 1:
        console.print(f"Minimum spanning tree: single vertex '{mst[0]}', no edges", markup=False)
        return

    pairs: List[Tuple[str, str]] = list(iter_pairs(mst))
    heading = "Minimum spanning tree"
    if total_weight is not None:
        heading += f" (total weight {total_weight})"
    console.print(heading, style="bold", markup=False)
    table = Table(show_header=True, header_style="bold white")
    table.add_column("#", justify="right")
    table.add_column("From", style="bright_yellow")
    table.add_column("To", style="bright_green")
    for i, (u, v) in enumerate(pairs[:max_rows], start=1):
        table.add_row(str(i), Text(u), Text(v))
    console.print(table)
    if max_rows is not None and len(pairs) > max_rows:
        console.print(f"... (showing {max_rows} out of {len(pairs)} edges)")


def print_report(
    source: str,
    report: Optional[Set[str]],
    console: Optional[Console] = None,
) -> None:
    console = console or Console()
    if report is None:
        console.print(f"Report from '{source}' is invalid", style="bold red", markup=False)
        return
    body = ", ".join(sorted(report)) if report else "(none)"
    title = Text(f"Report for subgraph from '{source}' ({len(report)} vertices)")
    console.print(Panel(Text(body), title=title, expand=False))


def print_graph_statistics(
    stats: Iterable[Tuple[str, object]],
    title: str = "Graph statistics",
    console: Optional[Console] = None,
) -> None:
    console = console or Console()
    table = Table(title=title, show_header=False)
    table.add_column("Property", style="bold")
    table.add_column("Value", justify="right")
    for key, value in stats:
        table.add_row(Text(key), Text(str(value)))
    console.print(table)


def print_benchmark_results(
    title: str,
    timings: Dict[str, float],
    console: Optional[Console] = None,
) -> None:
    console = console or Console()
    table = Table(show_header=True, header_style="bold white", expand=False)
    table.add_column("Operation", style="bright_yellow")
    table.add_column("Average (ms)", style="bold cyan", justify="right")
    for name, millis in timings.items():
        table.add_row(name, f"{millis:.6f}")
    console.print(Panel(table, expand=False, title=title, border_style="bold white"))
