from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd
from rich.console import Console
from rich.markup import escape

from .parsing import CountEntry, find_problems, parse_entry


def read_lines(path: Path) -> List[str]:
    """Read the whole dataset; assumes newline-delimited UTF-8 text."""
    return Path(path).read_text(encoding='utf-8').splitlines()


@dataclass(frozen=True)
class CountCollection:
    """Entries in file order; never mutated once built."""

    entries: Tuple[CountEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, i: int) -> CountEntry:
        return self.entries[i]

    @cached_property
    def frame(self) -> pd.DataFrame:
        """Shared read-only view: one row per entry, indexed by file position."""
        df = pd.DataFrame({
            'timestamp': pd.Series(
                np.array([e.timestamp.to_datetime64() for e in self.entries], dtype='datetime64[s]'),
            ),
            'count': pd.Series([e.count for e in self.entries], dtype='int64'),
            'raw_text': pd.Series([e.raw_text for e in self.entries], dtype=object),
        })
        df.index.name = 'position'
        return df

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        strict: bool = False,
        console: Optional[Console] = None,
    ) -> 'CountCollection':
        """Parse raw dataset lines, skipping blank ones.

        In lenient mode every record that had to be zero-filled is reported
        on `console` (stderr by default) and kept.
        """
        console = console or Console(stderr=True)
        entries = []
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            entry = parse_entry(line, strict=strict, line_no=line_no)
            if not strict:
                for problem in find_problems(line):
                    console.print(f'[yellow]![/yellow] line {line_no}: {escape(problem)}', highlight=False)
            entries.append(entry)
        return cls(entries=tuple(entries))

    @classmethod
    def from_path(
        cls,
        path: Path,
        strict: bool = False,
        console: Optional[Console] = None,
    ) -> 'CountCollection':
        return cls.from_lines(read_lines(path), strict=strict, console=console)
