from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
import pytest

import sun_chart
from suntimes.chart import render_grid, sun_up_grid


@pytest.fixture(scope="module")
def arctic_grid() -> np.ndarray:
    return sun_up_grid(2022, 80.0, 0.0)


def test_grid_shape_follows_year_length(arctic_grid: np.ndarray):
    assert arctic_grid.shape == (365, 24)
    assert arctic_grid.dtype == np.bool_
    assert sun_up_grid(2024, 0.0).shape == (366, 24)


def test_arctic_grid_has_polar_day_and_night(arctic_grid: np.ndarray):
    assert not arctic_grid[354].any()  # 2022-12-21
    assert arctic_grid[171].all()  # 2022-06-21
    assert 0 < arctic_grid.sum() < arctic_grid.size


def test_equatorial_equinox_has_half_a_day_of_sun():
    grid = sun_up_grid(2022, 0.0, 0.0)
    assert 11 <= grid[78].sum() <= 13  # 2022-03-20


def test_invalid_year_is_rejected():
    with pytest.raises(ValueError):
        sun_up_grid(0, 10.0)


def test_render_grid(arctic_grid: np.ndarray):
    text = render_grid(arctic_grid, 2022)
    lines = text.splitlines()
    assert len(lines) == 25
    header = lines[0][3:]
    assert len(header) == 183
    assert header[0] == "J"
    assert header[-1] == "D"
    assert lines[1].startswith("00 ")
    assert lines[24].startswith("23 ")
    assert set(lines[1][3:]) <= {"#", "."}


def test_render_grid_rejects_bad_shape():
    with pytest.raises(ValueError):
        render_grid(np.zeros((365, 12), dtype=bool), 2022)


def test_cli_prints_chart(capsys: pytest.CaptureFixture[str]):
    assert sun_chart.main(["--lat", "80", "--year", "2022"]) == 0
    output = capsys.readouterr().out
    assert len(output.splitlines()) == 25


def test_cli_rejects_out_of_range_latitude():
    with pytest.raises(SystemExit) as excinfo:
        sun_chart.main(["--lat", "95"])
    assert excinfo.value.code == 2
