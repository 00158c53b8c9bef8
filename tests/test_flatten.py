from kungfu import Nothing, Some

from nestflip.flatten import (
    flatten_map_of_maps,
    flatten_map_of_seqs,
    flatten_seq_of_maps,
    flatten_seq_of_options,
    flatten_seq_of_seqs,
)


def test_flatten_seq_of_seqs_concatenates_in_order():
    assert flatten_seq_of_seqs([[1, 2], [3], [4, 5, 6]]) == [1, 2, 3, 4, 5, 6]


def test_flatten_seq_of_seqs_accepts_iterators_and_empties():
    rows = (iter(row) for row in [[], ["a"], [], ["b", "c"]])
    assert flatten_seq_of_seqs(rows) == ["a", "b", "c"]
    assert flatten_seq_of_seqs([]) == []


def test_flatten_seq_of_options_drops_nothing():
    items = [Some(1), Nothing(), Some(None), Nothing(), Some(3)]
    assert flatten_seq_of_options(items) == [1, None, 3]


def test_flatten_map_of_maps_uses_pair_keys():
    table = {"x": {"p": 1, "q": 2}, "y": {"q": 3}, "z": {}}
    assert flatten_map_of_maps(table) == {("x", "p"): 1, ("x", "q"): 2, ("y", "q"): 3}


def test_flatten_map_of_seqs_uses_key_index():
    columns = {"a": [10, 20], "b": [], "c": (30,)}
    assert flatten_map_of_seqs(columns) == {("a", 0): 10, ("a", 1): 20, ("c", 0): 30}


def test_flatten_seq_of_maps_uses_index_key():
    assert flatten_seq_of_maps([{"a": 1}, {"b": 2}]) == {(0, "a"): 1, (1, "b"): 2}


def test_flatten_outputs_are_fresh():
    rows = [[1, 2]]
    flat = flatten_seq_of_seqs(rows)
    flat.append(3)
    assert rows == [[1, 2]]
