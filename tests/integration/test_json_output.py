"""
Integration tests for JSON output of the command line tool.
"""

import json

import pytest

from muzz.main import main


def run_json(capsys, *argv) -> dict:
    assert main(["--json", *argv]) == 0
    return json.loads(capsys.readouterr().out)


def test_energy_json(capsys):
    data = run_json(capsys, "-p", "230", "900")

    assert data["target"] == "energy"
    assert data["value"] == 413.78
    assert data["constant"] == 450240.0
    assert data["metadata"] == {"constant_mode": "industry"}
    assert data["formatted"] == "230.00 gr @ 900.00 ft/s = 413.78 lbf"


def test_velocity_json_si(capsys):
    data = run_json(capsys, "-vsq", "15", "546.75")

    assert data["target"] == "velocity"
    assert data["units"] == "si"
    assert data["value"] == pytest.approx(270.0)
    assert data["inputs"] == {"mass": 15.0, "velocity": 270.0, "energy": 546.75}
    assert data["formatted"] == "270"


def test_knockout_json(capsys):
    data = run_json(capsys, "-ts", "15", "255", "11.6")

    assert data["target"] == "knockout"
    assert data["value"] == 12.68
    assert data["inputs"]["diameter"] == 11.6
    assert data["formatted"] == "15.00 g @ 255.00 m/s (11.60 mm diameter) = 12.68 TKOF"


def test_json_not_printed_on_error(capsys):
    assert main(["--json", "-m", "0", "414"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "zero velocity" in captured.err


def test_json_value_rounds_half_away_from_zero(capsys):
    """0.5 * 0.5^2 / 1 = 0.125 exactly; JSON and text must both give 0.13."""
    data = run_json(capsys, "-p", "-k", "1", "-s", "1", "0.5")

    assert data["value"] == 0.13
    assert data["inputs"]["energy"] == 0.13
    assert data["formatted"] == "1.00 g @ 0.50 m/s = 0.13 J"
