"""Unit tests for the live-then-static Sankey loader."""

from unittest.mock import patch

import pytest

from energy_rows import EnergyRow
from energy_transform import transform_energy_balance
from generate_energy_data import write_energy_balance
from mospi_energy_client import MospiApiError
from sankey_data import load_sankey_data, read_energy_balance


@patch("sankey_data.fetch_energy_balance")
def test_live_path(mock_fetch, tmp_path):
    mock_fetch.return_value = {
        "supply": [EnergyRow("2023-24", "Coal", "Production", 100.0)],
        "consumption": [EnergyRow("2023-24", "Coal", "Industry", 40.0)],
    }
    data = load_sankey_data("2023-24", "KToE", static_dir=str(tmp_path))

    assert data["year"] == "2023-24"
    assert data["totalSupply"] == 100.0
    assert [link["label"] for link in data["links"]] == [
        "Production → Coal",
        "Coal → Industry",
        "Coal → Electricity Generation",
    ]


@patch("sankey_data.fetch_energy_balance")
def test_falls_back_to_static_file(mock_fetch, tmp_path, supply_rows_2023, consumption_rows_2023):
    mock_fetch.side_effect = MospiApiError("MoSPI API returned error: timeout")
    balance = transform_energy_balance(supply_rows_2023, consumption_rows_2023, "KToE", "2023-24")
    write_energy_balance(balance, tmp_path)

    with pytest.warns(UserWarning, match="Live energy balance unavailable"):
        data = load_sankey_data("2023-24", "KToE", static_dir=str(tmp_path))

    assert data["totalConsumption"] == pytest.approx(balance.total_consumption)
    assert len(data["links"]) == len(balance.links)
    assert mock_fetch.call_count == 1


@patch("sankey_data.fetch_energy_balance")
def test_missing_static_file(mock_fetch, tmp_path):
    mock_fetch.side_effect = MospiApiError("down")
    with pytest.warns(UserWarning):
        with pytest.raises(FileNotFoundError):
            load_sankey_data("2019-20", "PetaJoules", static_dir=str(tmp_path))


def test_read_energy_balance_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_energy_balance(tmp_path / "energy-sankey-2023-24-ktoe.json")
