from __future__ import annotations

import dataclasses

import pandas as pd
import pytest

from traffic_counts.collection import CountCollection, read_lines
from traffic_counts.parsing import MalformedRecordError

from conftest import SAMPLE_LINES, SAMPLE_PATH


def test_read_lines_matches_sample():
    assert read_lines(SAMPLE_PATH) == SAMPLE_LINES


def test_from_path_builds_all_entries(quiet_console):
    data = CountCollection.from_path(SAMPLE_PATH, console=quiet_console)
    assert len(data) == 24
    assert [e.raw_text for e in data] == SAMPLE_LINES


def test_from_path_missing_file_raises(tmp_path, quiet_console):
    with pytest.raises(FileNotFoundError):
        CountCollection.from_path(tmp_path / 'nope.txt', console=quiet_console)


def test_file_order_is_kept(make_collection):
    data = make_collection(['2021-12-02T10:00:00 1', '2021-12-01T10:00:00 2', '2021-12-02T10:00:00 3'])
    assert [e.count for e in data] == [1, 2, 3]
    assert data[0].timestamp == data[2].timestamp  # duplicates are not merged


def test_blank_lines_are_skipped(tmp_path, quiet_console):
    path = tmp_path / 'counts.txt'
    path.write_text('2021-12-01T05:00:00 5\n\n   \n2021-12-01T05:30:00 12\n', encoding='utf-8')
    data = CountCollection.from_path(path, console=quiet_console)
    assert [e.count for e in data] == [5, 12]


def test_lenient_load_warns_and_continues(make_collection, quiet_console):
    data = make_collection(['2021-12-01T05:00:00 five', '2021-12-01T05:30:00 12'])
    assert [e.count for e in data] == [0, 12]
    assert data[0].raw_text == '2021-12-01T05:00:00 five'
    out = quiet_console.file.getvalue()
    assert 'line 1' in out
    assert "'five'" in out


def test_strict_load_reports_line_number(make_collection):
    with pytest.raises(MalformedRecordError) as excinfo:
        make_collection(['2021-12-01T05:00:00 5', '', '2021-12-01T05:30:00 x'], strict=True)
    assert excinfo.value.line_no == 3


def test_collection_is_immutable(sample):
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample.entries = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample[0].count = 99


def test_frame_view(sample):
    df = sample.frame
    assert list(df.columns) == ['timestamp', 'count', 'raw_text']
    assert df.index.name == 'position'
    assert pd.api.types.is_datetime64_any_dtype(df['timestamp'])
    assert df['count'].tolist()[:3] == [5, 12, 14]
    assert sample.frame is df


def test_empty_collection_frame(make_collection):
    df = make_collection([]).frame
    assert df.empty
    assert pd.api.types.is_datetime64_any_dtype(df['timestamp'])
