from __future__ import annotations

import datetime as dt
from typing import Optional

import numpy as np
import pandas as pd

from .collection import CountCollection


HALF_HOUR = pd.Timedelta(minutes=30).as_unit('s')
TOP_N = 3


def total_count(collection: CountCollection) -> int:
    return int(collection.frame['count'].sum())


def total_for_day(collection: CountCollection, day: dt.date) -> int:
    df = collection.frame
    return int(df.loc[df['timestamp'].dt.date == day, 'count'].sum())


def daily_totals(collection: CountCollection, chronological: bool = False) -> pd.DataFrame:
    """Per-day sums as (date, total) rows.

    Days come out in the order they first appear in the file unless
    `chronological` is set. Entries without a usable timestamp belong to no day.
    """
    df = collection.frame.dropna(subset=['timestamp'])
    days = df['timestamp'].dt.date.rename('date')

    out = (
        df.groupby(days, sort=False)['count']
        .sum()
        .rename('total')
        .reset_index()
    )
    out['total'] = out['total'].astype('int64')

    if chronological:
        out = out.sort_values('date', kind='stable').reset_index(drop=True)
    return out


def top_counts(collection: CountCollection, n: int = TOP_N) -> pd.DataFrame:
    """The n busiest entries, highest count first; ties keep file order."""
    df = collection.frame
    order = np.argsort(-df['count'].to_numpy(), kind='stable')
    return df.iloc[order[:n]]


def contiguous_windows(collection: CountCollection) -> pd.DataFrame:
    """All 90 minute windows of three back-to-back half-hour entries, lowest total first.

    A window starts at position i when entry i+1 is exactly 30 minutes and
    entry i+2 exactly 60 minutes after entry i, so a gap in the readings
    breaks the window even when the rows are adjacent in the file.
    `end` is the start of the window's last half hour.
    """
    df = collection.frame
    ts = df['timestamp']
    counts = df['count']

    ts_1 = ts.shift(-1)
    ts_2 = ts.shift(-2)
    # ts + step would overflow for readings at the end of the range
    contiguous = (ts_1 - ts == HALF_HOUR) & (ts_2 - ts == 2 * HALF_HOUR)

    totals = counts + counts.shift(-1) + counts.shift(-2)

    windows = pd.DataFrame({
        'total': totals[contiguous].astype('int64'),
        'start': ts[contiguous],
        'end': ts_2[contiguous],
    })
    return windows.sort_values('total', kind='stable')


def lowest_window(collection: CountCollection) -> Optional[pd.Series]:
    windows = contiguous_windows(collection)
    if windows.empty:
        return None
    return windows.iloc[0]
