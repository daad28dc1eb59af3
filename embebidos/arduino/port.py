"""Locate a USB serial adapter by its vendor and product identifiers."""

from __future__ import annotations

from serial.tools import list_ports

VID = 0x1A86
PID = 0x7523


def find_arduino_port(vid: int = VID, pid: int = PID) -> str | None:
    """Return the device name of the first USB port with this VID and PID.

    Returns None when no such port is present or ports cannot be listed.
    """
    try:
        ports = list_ports.comports()
    except OSError:
        return None
    for port in ports:
        if port.vid is None or port.pid is None:
            continue
        if port.vid == vid and port.pid == pid:
            return port.device
    return None