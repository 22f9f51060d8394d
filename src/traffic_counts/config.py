from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ReportConfig:
    # Input (repo-relative by default)
    data_path: Path = Path('data/data.txt')

    # Record handling: lenient zero-fills malformed fields, strict rejects the record
    strict: bool = False

    # Per-day output order: first appearance in the file, or sorted by date
    chronological_days: bool = False
