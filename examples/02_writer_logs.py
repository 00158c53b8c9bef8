from __future__ import annotations

from _infra import Failure, banner, run

from kungfu import Error, Ok

from nestflip import (
    WriterResult,
    _helpers,
    transpose_matrix_w,
    transpose_result_of_result,
    transpose_seq_of_maps_w,
    transpose_seq_of_results,
)


def main() -> None:
    banner("02_writer_logs: diagnostics travel with the result")

    writers = [
        transpose_matrix_w([[1, 2], [3, 4], [5, 6]]),
        transpose_matrix_w([[1, 2], [3]]),
        transpose_seq_of_maps_w([{"a": 1}, {"a": 2, "b": 3}]),
    ]
    for wr in writers:
        match wr:
            case WriterResult(Ok(value), _):
                print(f"ok: {value!r}")
            case WriterResult(Error(err), _):
                print(f"error: {err!r}")

    print(f"log: {list(_helpers.merge_logs(wr.log for wr in writers))!r}")

    banner("02_writer_logs: first failure wins")
    outcome = transpose_seq_of_results([Ok(1), Error(Failure("sensor offline")), Error(Failure("late"))])
    print(f"collected: {outcome!r}")
    print(f"re-tagged: {transpose_result_of_result(Ok(outcome))!r}")


if __name__ == "__main__":
    run(main)
