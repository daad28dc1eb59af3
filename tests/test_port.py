from types import SimpleNamespace
from unittest.mock import patch

from embebidos.arduino.port import PID, VID, find_arduino_port


def _port(device, vid=None, pid=None):
    return SimpleNamespace(device=device, vid=vid, pid=pid)


def test_finds_matching_usb_port():
    ports = [_port("/dev/ttyS0"), _port("/dev/ttyUSB0", VID, PID)]
    with patch("serial.tools.list_ports.comports", return_value=ports):
        assert find_arduino_port(VID, PID) == "/dev/ttyUSB0"


def test_defaults_use_module_identifiers():
    ports = [_port("/dev/ttyUSB3", VID, PID)]
    with patch("serial.tools.list_ports.comports", return_value=ports):
        assert find_arduino_port() == "/dev/ttyUSB3"


def test_first_match_wins():
    ports = [_port("/dev/ttyUSB1", VID, PID), _port("/dev/ttyUSB2", VID, PID)]
    with patch("serial.tools.list_ports.comports", return_value=ports):
        assert find_arduino_port(VID, PID) == "/dev/ttyUSB1"


def test_no_match_returns_none():
    ports = [_port("/dev/ttyUSB0", 0x1234, 0x5678), _port("/dev/ttyS0")]
    with patch("serial.tools.list_ports.comports", return_value=ports):
        assert find_arduino_port(VID, PID) is None


def test_vid_must_match_as_well_as_pid():
    ports = [_port("/dev/ttyUSB0", 0x1234, PID)]
    with patch("serial.tools.list_ports.comports", return_value=ports):
        assert find_arduino_port(VID, PID) is None


def test_listing_failure_returns_none():
    with patch("serial.tools.list_ports.comports", side_effect=OSError("denied")):
        assert find_arduino_port(VID, PID) is None