from __future__ import annotations

from _infra import banner, run, sample_readings

from kungfu import Nothing, Some

from nestflip import (
    flatten_seq_of_seqs,
    transpose_map_of_maps,
    transpose_map_of_seqs,
    transpose_matrix,
    transpose_seq_of_maps,
)


def main() -> None:
    banner("01_quickstart: flatten + transpose")

    print(flatten_seq_of_seqs([[1, 2], [3], [4, 5, 6]]))

    match transpose_matrix([[1, 2, 3], [4, 5, 6]]):
        case Some(columns):
            print(f"columns: {columns}")
        case Nothing():
            print("ragged matrix")

    # sensor -> hour -> reading, pivoted to hour -> sensor -> reading
    by_sensor: dict[str, dict[int, float]] = {}
    for reading in sample_readings():
        by_sensor.setdefault(reading.sensor, {})[reading.hour] = reading.celsius
    print(f"by hour: {transpose_map_of_maps(by_sensor)}")

    # Columns drop the hour: east has one value, the others two, so east's
    # hour-1 reading lands in record 0 and east is absent from record 1.
    columns = {sensor: list(hours.values()) for sensor, hours in by_sensor.items()}
    records = transpose_map_of_seqs(columns)
    print(f"records: {records}")
    match transpose_seq_of_maps(records):
        case Some(back):
            print(f"round-trip: {back}")
        case Nothing():
            print("round-trip rejected: east is absent from record 1")


if __name__ == "__main__":
    run(main)
