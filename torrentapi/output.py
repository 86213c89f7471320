"""Plain-text rendering of search results."""

from collections.abc import Iterable
from typing import TextIO

from .models import TorrentResult

HEADER = ("File Name", "Category", "Seeders", "Leechers", "Ranked", "Size")


def humanize_size(size: int) -> str:
    """Format bytes as 123, 1.50k, 2.25M or 3.00G."""
    if size < 1024:
        return str(int(size))
    if size < 1024**2:
        return f"{size / 1024:.2f}k"
    if size < 1024**3:
        return f"{size / 1024**2:.2f}M"
    return f"{size / 1024**3:.2f}G"


def result_row(result: TorrentResult) -> tuple[str, ...]:
    return (
        result.name,
        result.category,
        str(result.seeders),
        str(result.leechers),
        str(result.ranked),
        humanize_size(result.size),
    )


def format_table(rows: Iterable[tuple[str, ...]], padding: int = 1) -> list[str]:
    """Left-align columns to the widest cell plus padding."""
    rows = list(rows)
    if not rows:
        return []
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    lines = []
    for row in rows:
        cells = [
            cell.ljust(widths[i] + padding) for i, cell in enumerate(row[:-1])
        ]
        cells.append(row[-1])
        lines.append("".join(cells).rstrip())
    return lines


def print_results(results: list[TorrentResult], out: TextIO) -> None:
    """Print results as an aligned table with a header line."""
    rows = [HEADER] + [result_row(r) for r in results]
    for line in format_table(rows):
        print(line, file=out)
