from _support import unwrap_error, unwrap_ok
from kungfu import Error, Ok

from nestflip import WriterResult
from nestflip._helpers import merge_logs
from nestflip.writer import Log, writer_error, writer_ok


def test_log_identity_and_associativity():
    x, y, z = Log.of("a"), Log.of("b", "c"), Log.of("d")
    assert Log().combine(x) == x
    assert x.combine(Log()) == x
    assert x.combine(y).combine(z) == x.combine(y.combine(z))


def test_log_operations_do_not_mutate():
    log = Log.of("a")
    told = log.tell("b")
    combined = log.combine(Log.of("c"))
    assert log == ["a"]
    assert told == ["a", "b"]
    assert combined == ["a", "c"]


def test_merge_logs():
    assert merge_logs([Log.of(1), Log(), Log.of(2, 3)]) == [1, 2, 3]
    assert merge_logs([]) == []


def test_writer_result_matches_positionally():
    wr = WriterResult(Ok(5), Log.of("five"))
    match wr:
        case WriterResult(Ok(value), log):
            assert value == 5
            assert log == ["five"]
        case _:
            raise AssertionError(f"unexpected {wr!r}")


def test_writer_ok_and_error():
    ok = writer_ok([1], "built")
    err = writer_error("bad", "rejected", "twice")
    assert unwrap_ok(ok.result) == [1]
    assert ok.log == ["built"]
    assert unwrap_error(err.result) == "bad"
    assert err.log == ["rejected", "twice"]
    assert isinstance(err.log, Log)


def test_writer_result_repr_mentions_log():
    assert "log=" in repr(WriterResult(Error("x"), Log()))
