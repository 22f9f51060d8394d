#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from traffic_counts.collection import CountCollection
from traffic_counts.config import ReportConfig
from traffic_counts.parsing import MalformedRecordError
from traffic_counts.report import build_report, print_report


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description='Report totals, per-day totals, busiest half hours and the quietest 90 minutes.')
    ap.add_argument('--data', type=str, default=str(ReportConfig().data_path), help='Input file: one "<timestamp> <count>" record per line.')
    ap.add_argument('--strict', action='store_true', help='Fail on the first malformed record instead of counting it as 0.')
    ap.add_argument('--chronological-days', action='store_true', help='Sort per-day totals by date instead of first appearance.')
    args = ap.parse_args(argv)

    cfg = ReportConfig(
        data_path=Path(args.data),
        strict=args.strict,
        chronological_days=args.chronological_days,
    )

    console = Console()
    try:
        with console.status(f'Reading {escape(str(cfg.data_path))} …', spinner='dots'):
            data = CountCollection.from_path(cfg.data_path, strict=cfg.strict)
    except OSError as e:
        raise SystemExit(f'Cannot read input {cfg.data_path}: {e.strerror or e}')
    except UnicodeDecodeError as e:
        raise SystemExit(f'Cannot decode input {cfg.data_path} as UTF-8: {e}')
    except MalformedRecordError as e:
        raise SystemExit(f'Malformed record in {cfg.data_path}, {e}')

    console.print(f'[dim]Entries:[/dim] {len(data):,}')
    console.print()
    print_report(build_report(data, cfg), console=console)


if __name__ == '__main__':
    main()
