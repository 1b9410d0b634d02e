"""Pytest configuration and shared fixtures."""

import pytest

import config
from energy_data import CONSUMPTION_DATA, SUPPLY_DATA
from energy_rows import EnergyRow, consumption_rows_for, supply_rows_for


@pytest.fixture
def supply_rows_2023():
    """Verified 2023-24 supply rows (KToE)."""
    return supply_rows_for("2023-24", SUPPLY_DATA["2023-24"])


@pytest.fixture
def consumption_rows_2023():
    """Verified 2023-24 sector-level consumption rows (KToE)."""
    return consumption_rows_for("2023-24", CONSUMPTION_DATA["2023-24"])


@pytest.fixture
def make_row():
    """Factory for single EnergyRow instances."""
    def _make(commodity, sector, value, sub_sector=None, year="2023-24"):
        return EnergyRow(year=year, commodity=commodity, sector=sector,
                         value=value, sub_sector=sub_sector)
    return _make


@pytest.fixture
def generation_config(tmp_path):
    """Configuration writing into a temporary directory."""
    return config.get_config(custom_paths={
        "output_dir": str(tmp_path / "out"),
        "overrides": str(tmp_path / "consumption-overrides.json"),
        "summary_csv": "",
    })
