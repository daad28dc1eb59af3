import csv
import io
from types import SimpleNamespace
from unittest.mock import patch

import serial

from embebidos.arduino.commands import collect_main, record_main
from embebidos.arduino.port import PID, VID

_DEVICE = [SimpleNamespace(device="/dev/ttyUSB0", vid=VID, pid=PID)]


def test_collect_without_device_reports_error(capsys):
    with patch("serial.tools.list_ports.comports", return_value=[]):
        status = collect_main([])
    out = capsys.readouterr().out
    assert status == 0
    assert "Error: Arduino port not found" in out
    assert "Collected 0 rows of data before error" in out


def test_collect_counts_rows(capsys):
    with patch("serial.tools.list_ports.comports", return_value=_DEVICE), patch(
        "serial.Serial", side_effect=lambda *a, **k: io.BytesIO(b"1-2\n3-4\n")
    ):
        collect_main([])
    assert "Collected 2 rows of data" in capsys.readouterr().out


def test_collect_open_failure_reports_error(capsys):
    with patch("serial.tools.list_ports.comports", return_value=_DEVICE), patch(
        "serial.Serial", side_effect=serial.SerialException("busy")
    ):
        collect_main([])
    out = capsys.readouterr().out
    assert "Error: busy" in out
    assert "Collected 0 rows of data before error" in out


def test_record_without_device(tmp_path, capsys):
    output = tmp_path / "data.csv"
    with patch("serial.tools.list_ports.comports", return_value=[]):
        record_main(["--output", str(output), "--wait", "0"])
    assert "No se encontro el arduino" in capsys.readouterr().out
    assert not output.exists()


def test_record_writes_csv(tmp_path):
    output = tmp_path / "data.csv"
    with patch("serial.tools.list_ports.comports", return_value=_DEVICE), patch(
        "serial.Serial", side_effect=lambda *a, **k: io.BytesIO(b"10,20.5,30\nbad\n")
    ):
        status = record_main(["--output", str(output), "--wait", "0"])
    assert status == 0
    with open(output, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows == [["Timestamp", "Temperature", "Humidity"], ["10", "20.5", "30"]]


def test_record_open_failure(tmp_path, capsys):
    output = tmp_path / "data.csv"
    with patch("serial.tools.list_ports.comports", return_value=_DEVICE), patch(
        "serial.Serial", side_effect=serial.SerialException("busy")
    ):
        record_main(["--output", str(output), "--wait", "0"])
    assert "Error de conexion serial: busy" in capsys.readouterr().out
    assert not output.exists()