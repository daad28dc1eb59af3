"""Record comma-separated sensor readings into a CSV file."""

from __future__ import annotations

import csv
import os

HEADER = ("Timestamp", "Temperature", "Humidity")


def write_sensor_data(stream, file_path: str | os.PathLike[str]) -> int:
    """Copy three-field readings from ``stream`` into a CSV file at ``file_path``.

    The file gets a header row first; lines that do not have exactly three
    comma-separated fields are skipped. Each row is flushed as it arrives.
    A read error ends the recording. Returns the number of rows written.
    """
    written = 0
    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(HEADER)
        handle.flush()

        while True:
            try:
                raw = stream.readline()
                text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Error al leer datos: {exc}")
                break
            if not text:
                break
            line = text.strip()
            if not line:
                continue
            fields = line.split(",")
            if len(fields) == len(HEADER):
                writer.writerow(fields)
                handle.flush()
                written += 1
    return written