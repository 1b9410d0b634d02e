"""Unit tests for the MoSPI Energy Balance API client (requests is mocked)."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from energy_rows import EnergyRow
from mospi_energy_client import (
    COMMODITY_CODES,
    CONSUMPTION_SECTOR_CODES,
    SUPPLY_SECTOR_CODES,
    MospiApiError,
    fetch_all_pages,
    fetch_energy_balance,
    fetch_page,
    rows_from_api,
)


def _api_row(commodity, sector, value, sub_sector=None, year="2023-24"):
    return {
        "year": year,
        "indicator": "KToE",
        "use_of_energy_balance": "Supply",
        "energy_commodities": commodity,
        "energy_sub_commodities": None,
        "end_use_sector": sector,
        "end_use_sub_sector": sub_sector,
        "value": value,
    }


def _response(data, page=1, total_pages=1, status=True, msg="Data fetched", http_status=200):
    response = MagicMock()
    response.status_code = http_status
    if http_status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{http_status} Server Error")
    response.json.return_value = {
        "data": data,
        "meta_data": {"page": page, "totalRecords": len(data or []),
                      "totalPages": total_pages, "recordPerPage": 200},
        "msg": msg,
        "statusCode": status,
    }
    return response


class TestFetchPage:

    @patch("mospi_energy_client.requests.get")
    def test_adds_format_and_timeout(self, mock_get):
        mock_get.return_value = _response([])
        fetch_page({"year": "2023-24"})

        _, kwargs = mock_get.call_args
        assert kwargs["params"] == {"year": "2023-24", "Format": "JSON"}
        assert kwargs["timeout"] == 30

    @patch("mospi_energy_client.requests.get")
    def test_status_code_false_is_error_on_http_200(self, mock_get):
        mock_get.return_value = _response(None, status=False, msg="Invalid year")
        with pytest.raises(MospiApiError, match="Invalid year"):
            fetch_page({"year": "1999-00"})

    @patch("mospi_energy_client.requests.get")
    def test_http_error(self, mock_get):
        mock_get.return_value = _response([], http_status=503)
        with pytest.raises(MospiApiError, match="request failed"):
            fetch_page({})

    @patch("mospi_energy_client.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("unreachable")
        with pytest.raises(MospiApiError):
            fetch_page({})

    @patch("mospi_energy_client.requests.get")
    def test_invalid_json(self, mock_get):
        response = _response([])
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response
        with pytest.raises(MospiApiError, match="invalid JSON"):
            fetch_page({})


class TestPagination:

    @patch("mospi_energy_client.requests.get")
    def test_fetches_remaining_pages(self, mock_get):
        mock_get.side_effect = [
            _response([_api_row("Coal", "Production", 1)], page=1, total_pages=3),
            _response([_api_row("Coal", "Imports", 2)], page=2, total_pages=3),
            _response(None, page=3, total_pages=3),
        ]
        rows = fetch_all_pages({"year": "2023-24"})

        assert [row["value"] for row in rows] == [1, 2]
        pages = [call.kwargs["params"]["page"] for call in mock_get.call_args_list]
        assert pages == ["1", "2", "3"]
        assert mock_get.call_args_list[0].kwargs["params"]["limit"] == "200"


class TestRowsFromApi:

    def test_maps_fields(self):
        rows = rows_from_api([
            _api_row("Coal", "Industry", 200947.38),
            _api_row("Coal", "Industry", 8000, sub_sector="Iron and steel"),
            _api_row("Coal", "Transport", "", sub_sector=""),
        ])
        assert rows == [
            EnergyRow("2023-24", "Coal", "Industry", 200947.38),
            EnergyRow("2023-24", "Coal", "Industry", 8000.0, sub_sector="Iron and steel"),
        ]

    def test_empty(self):
        assert rows_from_api([]) == []

    def test_missing_fields(self):
        with pytest.raises(MospiApiError, match="Missing fields"):
            rows_from_api([{"year": "2023-24", "value": 1}])


@patch("mospi_energy_client.requests.get")
def test_fetch_energy_balance_queries_both_sides(mock_get):
    mock_get.side_effect = [
        _response([_api_row("Coal", "Production", 403799.46)]),
        _response([_api_row("Coal", "Industry", 200947.38)]),
    ]
    balance = fetch_energy_balance("2023-24", "PetaJoules")

    supply_params = mock_get.call_args_list[0].kwargs["params"]
    consumption_params = mock_get.call_args_list[1].kwargs["params"]
    assert supply_params["indicator_code"] == "2"
    assert supply_params["use_of_energy_balance_code"] == "1"
    assert supply_params["end_use_sector_code"] == SUPPLY_SECTOR_CODES == "5,6,7,8,9"
    assert consumption_params["use_of_energy_balance_code"] == "2"
    assert consumption_params["end_use_sector_code"] == CONSUMPTION_SECTOR_CODES == "1,2,3,4,10"
    assert consumption_params["energy_commodities_code"] == COMMODITY_CODES == "1,2,3,4,5,6,7,8,9"
    assert balance["supply"][0].sector == "Production"
    assert balance["consumption"][0].value == 200947.38
