"""Command-line entry points for collecting data from the serial device."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

import serial

from embebidos.arduino.connection import receive_signals
from embebidos.arduino.csv_handler import write_sensor_data
from embebidos.arduino.port import PID, VID, find_arduino_port


def collect_main(argv: Sequence[str] | None = None) -> int:
    """Find the device, read its dash-separated rows and report how many arrived."""
    parser = argparse.ArgumentParser(description="Collect readings from the device.")
    parser.add_argument("--baud", type=int, default=9600, help="baud rate")
    parser.add_argument("--debug", action="store_true", help="echo received lines")
    args = parser.parse_args(argv)

    port_name = find_arduino_port(VID, PID)
    try:
        rows = receive_signals(port_name, args.baud, args.debug)
    except OSError as exc:
        print(f"Error: {exc}")
        print("Collected 0 rows of data before error")
        return 0
    print(f"Collected {len(rows)} rows of data")
    return 0


def record_main(argv: Sequence[str] | None = None) -> int:
    """Find the device, wait for it to settle and record its readings to CSV."""
    parser = argparse.ArgumentParser(description="Record sensor readings to CSV.")
    parser.add_argument("--output", default="sensor_data.csv", help="CSV file path")
    parser.add_argument("--baud", type=int, default=9600, help="baud rate")
    parser.add_argument(
        "--wait", type=float, default=10.0, help="seconds to wait after connecting"
    )
    args = parser.parse_args(argv)

    port_name = find_arduino_port(VID, PID)
    if port_name is None:
        print("No se encontro el arduino")
        return 0

    try:
        port = serial.Serial(port_name, args.baud, timeout=1.0)
    except serial.SerialException as exc:
        print(f"Error de conexion serial: {exc}")
        return 0

    with port:
        time.sleep(args.wait)
        write_sensor_data(port, args.output)
    return 0