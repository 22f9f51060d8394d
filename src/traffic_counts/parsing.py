from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd


TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S'

DATE_FIELDS = ('year', 'month', 'day')
TIME_FIELDS = ('hour', 'minute', 'second')

_UINT = re.compile(r'\+?[0-9]+')

# Both limits match u32; int64 sums of counts cannot wrap at realistic sizes
FIELD_MAX = int(np.iinfo(np.uint32).max)
COUNT_MAX = int(np.iinfo(np.uint32).max)


class MalformedRecordError(ValueError):
    """A record that strict parsing refuses to zero-fill."""

    def __init__(self, raw_text: str, problems: List[str], line_no: Optional[int] = None):
        self.raw_text = raw_text
        self.problems = list(problems)
        self.line_no = line_no
        where = f'line {line_no}' if line_no is not None else 'record'
        super().__init__(f"{where}: {'; '.join(self.problems)} (raw: {raw_text!r})")


@dataclass(frozen=True)
class CountEntry:
    timestamp: pd.Timestamp
    count: int
    raw_text: str  # kept verbatim for reprocessing

    @property
    def day(self) -> Optional[dt.date]:
        if pd.isna(self.timestamp):
            return None
        return self.timestamp.date()

    @property
    def timestamp_text(self) -> str:
        if pd.isna(self.timestamp):
            tokens = self.raw_text.split()
            return tokens[0] if tokens else ''
        return self.timestamp.strftime(TIMESTAMP_FORMAT)


def _parse_uint(token: Optional[str], limit: int) -> Optional[int]:
    if token is None:
        return None
    token = token.strip()
    if not _UINT.fullmatch(token):
        return None
    try:
        value = int(token)
    except ValueError:  # longer than int() will convert
        return None
    if value > limit:
        return None
    return value


def _split_fields(text: str, sep: str, names: Tuple[str, ...]) -> Tuple[List[int], List[str]]:
    """Parse up to len(names) unsigned fields from `text`, zero-filling the bad ones."""
    parts = text.split(sep) if text else []
    values: List[int] = []
    problems: List[str] = []
    for i, name in enumerate(names):
        token = parts[i] if i < len(parts) else None
        value = _parse_uint(token, FIELD_MAX)
        if value is None:
            if token is None:
                problems.append(f'timestamp is missing its {name} field')
            else:
                problems.append(f'timestamp {name} is not an unsigned integer up to {FIELD_MAX}: {token!r}')
            value = 0
        values.append(value)
    return values, problems


def _timestamp_fields(text: str) -> Tuple[List[int], List[str]]:
    # "2021-12-01T05:00:00" -> [2021, 12, 1] + [5, 0, 0]
    date_part, _, time_part = text.partition('T')
    ymd, date_problems = _split_fields(date_part, '-', DATE_FIELDS)
    hms, time_problems = _split_fields(time_part, ':', TIME_FIELDS)
    return ymd + hms, date_problems + time_problems


def _build_timestamp(fields: List[int]) -> pd.Timestamp:
    year, month, day, hour, minute, second = fields
    # second precision covers years 1-9999, unlike the default nanoseconds
    return pd.Timestamp(dt.datetime(year, month, day, hour, minute, second)).as_unit('s')


def parse_timestamp(text: str) -> pd.Timestamp:
    """Parse `YYYY-MM-DDTHH:MM:SS`.

    Every numeric field that fails to parse counts as 0. When the resulting
    fields do not name a real point in time (month 0, hour 24, ...) the
    result is NaT rather than an exception.
    """
    fields, _ = _timestamp_fields(text)
    try:
        return _build_timestamp(fields)
    except (ValueError, OverflowError):
        return pd.NaT


def parse_count(text: Optional[str]) -> int:
    value = _parse_uint(text, COUNT_MAX)
    return 0 if value is None else value


def find_problems(line: str) -> List[str]:
    """Everything lenient parsing would have to paper over for this line."""
    tokens = line.split()
    if not tokens:
        return ['record is empty']

    fields, problems = _timestamp_fields(tokens[0])
    if not problems:
        try:
            _build_timestamp(fields)
        except (ValueError, OverflowError) as e:
            problems.append(f'timestamp {tokens[0]!r} is not a valid date/time: {e}')

    if len(tokens) < 2:
        problems.append('record is missing its count field')
    elif _parse_uint(tokens[1], COUNT_MAX) is None:
        problems.append(f'count is not an unsigned integer up to {COUNT_MAX}: {tokens[1]!r}')

    return problems


def parse_entry(line: str, strict: bool = False, line_no: Optional[int] = None) -> CountEntry:
    """Turn one dataset line into a CountEntry.

    Lenient mode (default) zero-fills malformed fields and keeps the line in
    raw_text; strict mode raises MalformedRecordError instead.
    """
    if strict:
        problems = find_problems(line)
        if problems:
            raise MalformedRecordError(line, problems, line_no=line_no)

    tokens = line.split()
    ts_token = tokens[0] if tokens else ''
    count_token = tokens[1] if len(tokens) > 1 else None

    return CountEntry(
        timestamp=parse_timestamp(ts_token),
        count=parse_count(count_token),
        raw_text=line,
    )
