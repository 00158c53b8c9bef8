import pytest
from _support import is_nothing, unwrap_error, unwrap_ok, unwrap_some

from nestflip import Log, RaggedKeyError
from nestflip.transpose import (
    transpose_map_of_maps,
    transpose_map_of_seqs,
    transpose_seq_of_maps,
    transpose_seq_of_maps_w,
)


def test_transpose_map_of_maps_pivots_on_inner_key():
    table = {"x": {"p": 1, "q": 2}, "y": {"q": 3}}
    assert transpose_map_of_maps(table) == {"p": {"x": 1}, "q": {"x": 2, "y": 3}}


def test_transpose_map_of_maps_keeps_every_value():
    table = {"x": {"p": 1, "q": 2}, "y": {"q": 3, "r": 4}, "z": {}}
    pivot = transpose_map_of_maps(table)
    assert sum(len(row) for row in pivot.values()) == 4
    assert transpose_map_of_maps(pivot) == {"x": {"p": 1, "q": 2}, "y": {"q": 3, "r": 4}}


def test_transpose_map_of_maps_empty():
    assert transpose_map_of_maps({}) == {}
    assert transpose_map_of_maps({"x": {}}) == {}


def test_transpose_map_of_seqs_zips_columns():
    assert transpose_map_of_seqs({"a": [1, 2], "b": [3, 4]}) == [{"a": 1, "b": 3}, {"a": 2, "b": 4}]


def test_transpose_map_of_seqs_tolerates_ragged_columns():
    assert transpose_map_of_seqs({"a": [1, 2], "b": [3]}) == [{"a": 1, "b": 3}, {"a": 2}]
    assert transpose_map_of_seqs({"a": [], "b": [1, 2, 3]}) == [{"b": 1}, {"b": 2}, {"b": 3}]


def test_transpose_map_of_seqs_keeps_none_values():
    assert transpose_map_of_seqs({"a": [None, None]}) == [{"a": None}, {"a": None}]


def test_transpose_map_of_seqs_empty_columns():
    assert transpose_map_of_seqs({}) == []
    assert transpose_map_of_seqs({"a": [], "b": []}) == []


def test_transpose_seq_of_maps_builds_columns():
    records = [{"a": 1, "b": 3}, {"b": 4, "a": 2}]
    assert unwrap_some(transpose_seq_of_maps(records)) == {"a": [1, 2], "b": [3, 4]}


def test_transpose_seq_of_maps_empty_input():
    assert unwrap_some(transpose_seq_of_maps([])) == {}


def test_transpose_seq_of_maps_records_without_keys():
    assert unwrap_some(transpose_seq_of_maps([{}, {}])) == {}


@pytest.mark.parametrize(
    "records",
    [
        # key stops early
        [{"a": 1, "b": 3}, {"a": 2}],
        # key starts late
        [{"a": 1}, {"a": 2, "b": 3}],
        # key skips a record and reappears
        [{"a": 1, "b": 1}, {"a": 2}, {"a": 3, "b": 3}],
        # key only in the middle
        [{"a": 1}, {"a": 2, "b": 2}, {"a": 3}],
    ],
)
def test_transpose_seq_of_maps_rejects_ragged_keys(records):
    assert is_nothing(transpose_seq_of_maps(records))


def test_rectangular_columns_round_trip():
    columns = {"a": [1, 2, 3], "b": [4, 5, 6], "c": [7, 8, 9]}
    records = transpose_map_of_seqs(columns)
    assert unwrap_some(transpose_seq_of_maps(records)) == columns


def test_ragged_columns_do_not_round_trip():
    records = transpose_map_of_seqs({"a": [1, 2], "b": [3]})
    assert records == [{"a": 1, "b": 3}, {"a": 2}]
    assert is_nothing(transpose_seq_of_maps(records))


def test_transpose_seq_of_maps_w_reports_reappearing_key():
    wr = transpose_seq_of_maps_w([{"a": 1, "b": 1}, {"a": 2}, {"a": 3, "b": 3}])
    err = unwrap_error(wr.result)
    assert isinstance(err, RaggedKeyError)
    assert (err.key, err.index, err.length) == ("b", 2, 1)
    assert wr.log[0].startswith("transpose_seq_of_maps: rejected")


def test_transpose_seq_of_maps_w_reports_short_key():
    wr = transpose_seq_of_maps_w([{"a": 1, "b": 3}, {"a": 2}])
    err = unwrap_error(wr.result)
    assert (err.key, err.index, err.length) == ("b", 2, 1)


def test_transpose_seq_of_maps_w_logs_counts():
    wr = transpose_seq_of_maps_w([{"a": 1, "b": 3}, {"a": 2, "b": 4}])
    assert unwrap_ok(wr.result) == {"a": [1, 2], "b": [3, 4]}
    assert list(wr.log) == ["transpose_seq_of_maps: 2 records -> 2 columns"]


@pytest.mark.parametrize(
    "records",
    [
        [],
        [{}, {}],
        [{"a": 1, "b": 3}, {"a": 2, "b": 4}],
        [{"a": 1, "b": 3}, {"a": 2}],
        [{"a": 1}, {"a": 2, "b": 3}],
        [{"a": 1, "b": 1}, {"a": 2}, {"a": 3, "b": 3}],
    ],
)
def test_transpose_seq_of_maps_w_agrees_with_plain_variant(records):
    plain = transpose_seq_of_maps(records)
    wr = transpose_seq_of_maps_w(records)
    if is_nothing(plain):
        assert isinstance(unwrap_error(wr.result), RaggedKeyError)
    else:
        assert unwrap_ok(wr.result) == unwrap_some(plain)
    assert isinstance(wr.log, Log)
    assert len(wr.log) == 1
