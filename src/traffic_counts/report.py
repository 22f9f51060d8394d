from __future__ import annotations

from typing import List, Optional, Tuple

from rich.console import Console

from .aggregation import daily_totals, lowest_window, top_counts, total_count
from .collection import CountCollection
from .config import ReportConfig


NO_WINDOW_MESSAGE = 'No contiguous 90 minute window found in the data.'

Section = Tuple[str, List[str]]


def total_lines(collection: CountCollection) -> List[str]:
    return [str(total_count(collection))]


def daily_lines(collection: CountCollection, chronological: bool = False) -> List[str]:
    totals = daily_totals(collection, chronological=chronological)
    return [f'{day:%Y-%m-%d} {total}' for day, total in zip(totals['date'], totals['total'])]


def top_lines(collection: CountCollection) -> List[str]:
    top = top_counts(collection)
    lines = []
    for position, count in zip(top.index, top['count']):
        # entries keep the raw token when the timestamp could not be built
        lines.append(f'{collection[position].timestamp_text} {count}')
    return lines


def lowest_window_lines(collection: CountCollection) -> List[str]:
    best = lowest_window(collection)
    if best is None:
        return [NO_WINDOW_MESSAGE]
    return [f"{best['start']:%Y-%m-%d Starting:%H:%M} {int(best['total'])}"]


def build_report(collection: CountCollection, cfg: Optional[ReportConfig] = None) -> List[Section]:
    """The four report sections, in print order."""
    cfg = cfg or ReportConfig()
    return [
        ('Total cars counted', total_lines(collection)),
        ('Totals by day', daily_lines(collection, chronological=cfg.chronological_days)),
        ('Top three half hours with the most cars', top_lines(collection)),
        ('The 1.5 hour period with least cars', lowest_window_lines(collection)),
    ]


def print_report(sections: List[Section], console: Optional[Console] = None) -> None:
    console = console or Console()
    for i, (title, lines) in enumerate(sections):
        if i:
            console.print()
        console.print(f'[bold]{title}:[/bold]')
        for line in lines:
            console.print(line, markup=False, highlight=False)

