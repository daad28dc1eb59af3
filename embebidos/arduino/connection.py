"""Receive dash-separated readings from a serial device."""

from __future__ import annotations

import re

import serial

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class PortNotFoundError(FileNotFoundError):
    """Raised when no serial port was given to connect to."""


def _normalise(item: str) -> str:
    if _INT_PATTERN.fullmatch(item):
        number = int(item)
        if _I32_MIN <= number <= _I32_MAX:
            return str(number)
    return item


def parse_line(line: str) -> list[str]:
    """Split a trimmed line on ``-``; fields that are 32-bit integers are normalised."""
    return [_normalise(item) for item in line.strip().split("-")]


def read_signals(stream, debug: bool = False) -> list[list[str]]:
    """Read lines from ``stream`` until it runs dry and parse each non-blank one.

    A read or decoding error ends the reading; the rows gathered so far are kept.
    """
    rows: list[list[str]] = []
    while True:
        try:
            raw = stream.readline()
            text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error al procesar datos: {exc}")
            break
        if not text:
            break
        line = text.strip()
        if not line:
            continue
        if debug:
            print(f"Valores recibidos: {line}")
        rows.append(parse_line(line))
    return rows


def receive_signals(
    port_name: str | None, baud_rate: int = 9600, debug: bool = False
) -> list[list[str]]:
    """Open ``port_name`` and collect parsed rows until the device goes quiet."""
    if port_name is None:
        raise PortNotFoundError("Arduino port not found")
    try:
        port = serial.Serial(port_name, baud_rate, timeout=1.0)
    except serial.SerialException as exc:
        print(f"Error en la conexion serial: {exc}")
        raise ConnectionError(str(exc)) from exc
    with port:
        print("Conexion establecida")
        return read_signals(port, debug)