"""
MoSPI Energy Balance API client.

Dataset: ENERGY from eSankhyiki (api.mospi.gov.in). No API key required.

The API returns
    {"data": [...] | null,
     "meta_data": {"page", "totalRecords", "totalPages", "recordPerPage"},
     "msg": str,
     "statusCode": bool}
and reports failures with statusCode false, even on HTTP 200.
"""

from typing import Dict, List, Optional

import pandas as pd
import requests

import config
from energy_rows import EnergyRow
from energy_units import EnergyUnit

# indicator_code per unit
UNIT_CODES: Dict[EnergyUnit, str] = {
    EnergyUnit.KTOE: "1",
    EnergyUnit.PETAJOULES: "2",
}

SUPPLY_BALANCE_CODE = "1"
CONSUMPTION_BALANCE_CODE = "2"

COMMODITY_NAME_TO_CODE: Dict[str, int] = {
    "Coal": 1,
    "Crude Oil": 2,
    "Oil Products": 3,
    "Natural Gas": 4,
    "Nuclear": 5,
    "Hydro": 6,
    "Solar, Wind, Others": 7,
    "Electricity": 8,
    "Lignite": 9,
}

SUPPLY_SECTOR_NAME_TO_CODE: Dict[str, int] = {
    "Production": 5,
    "Imports": 6,
    "Exports": 7,
    "Stock changes": 8,
    "Total primary energy supply": 9,
}

CONSUMPTION_SECTOR_NAME_TO_CODE: Dict[str, int] = {
    "Industry": 1,
    "Transport": 2,
    "Others": 3,
    "Non-energy use": 4,
    "Final consumption": 10,
}


def _code_list(codes) -> str:
    return ",".join(str(code) for code in sorted(codes))


COMMODITY_CODES = _code_list(COMMODITY_NAME_TO_CODE.values())
SUPPLY_SECTOR_CODES = _code_list(SUPPLY_SECTOR_NAME_TO_CODE.values())
CONSUMPTION_SECTOR_CODES = _code_list(CONSUMPTION_SECTOR_NAME_TO_CODE.values())

# Raw API field -> EnergyRow field
API_COLUMNS: Dict[str, str] = {
    "year": "year",
    "energy_commodities": "commodity",
    "end_use_sector": "sector",
    "end_use_sub_sector": "sub_sector",
    "value": "value",
}


class MospiApiError(Exception):
    """Raised when the MoSPI API cannot be reached or reports a failure."""


def fetch_page(params: Dict[str, str],
               base_url: Optional[str] = None,
               timeout: Optional[float] = None) -> Dict:
    """
    Fetch a single page from the MoSPI API.

    Args:
        params: Query parameters (Format=JSON is added)
        base_url: API endpoint (defaults to config)
        timeout: Request timeout in seconds (defaults to config)

    Returns:
        Decoded JSON payload

    Raises:
        MospiApiError: On transport errors, HTTP errors, bad JSON or statusCode false
    """
    base_url = base_url or config.DEFAULT_CONFIG["mospi_base_url"]
    timeout = timeout or config.DEFAULT_CONFIG["request_timeout"]

    try:
        response = requests.get(base_url, params={**params, "Format": "JSON"}, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.exceptions.RequestException as e:
        raise MospiApiError(f"MoSPI API request failed: {e}") from e
    except ValueError as e:
        raise MospiApiError(f"MoSPI API returned invalid JSON: {e}") from e

    if not isinstance(payload, dict) or not payload.get("statusCode"):
        msg = payload.get("msg", "unknown error") if isinstance(payload, dict) else "unexpected payload"
        raise MospiApiError(f"MoSPI API returned error: {msg}")

    return payload


def fetch_all_pages(base_params: Dict[str, str], **request_kwargs) -> List[Dict]:
    """
    Fetch every page for a query and concatenate the raw rows.

    Args:
        base_params: Query parameters without limit/page
        **request_kwargs: Passed through to fetch_page (base_url, timeout)

    Returns:
        List of raw API row dictionaries
    """
    limit = str(config.DEFAULT_CONFIG["page_limit"])
    params = {**base_params, "limit": limit, "page": "1"}

    first_page = fetch_page(params, **request_kwargs)
    rows = list(first_page.get("data") or [])
    total_pages = int((first_page.get("meta_data") or {}).get("totalPages") or 1)

    for page in range(2, total_pages + 1):
        payload = fetch_page({**params, "page": str(page)}, **request_kwargs)
        rows.extend(payload.get("data") or [])

    return rows


def rows_from_api(raw_rows: List[Dict]) -> List[EnergyRow]:
    """
    Map raw API rows onto EnergyRow.

    Empty sub-sector strings become None; rows whose value is not numeric
    are dropped.
    """
    if not raw_rows:
        return []

    df = pd.DataFrame(raw_rows)
    missing_cols = [col for col in API_COLUMNS if col not in df.columns]
    if "end_use_sub_sector" in missing_cols:
        df["end_use_sub_sector"] = None
        missing_cols.remove("end_use_sub_sector")
    if missing_cols:
        raise MospiApiError(f"Missing fields in MoSPI API rows: {missing_cols}")

    df = df[list(API_COLUMNS)].rename(columns=API_COLUMNS)
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    df = df.dropna(subset=["value"])

    df["sub_sector"] = df["sub_sector"].map(
        lambda s: s.strip() if isinstance(s, str) and s.strip() else None
    )

    return [
        EnergyRow(
            year=str(record["year"]),
            commodity=record["commodity"],
            sector=record["sector"],
            value=float(record["value"]),
            sub_sector=record["sub_sector"] if isinstance(record["sub_sector"], str) else None,
        )
        for record in df.to_dict("records")
    ]


def _fetch_balance_side(year: str, unit, balance_code: str, sector_codes: str,
                        **request_kwargs) -> List[EnergyRow]:
    raw_rows = fetch_all_pages({
        "indicator_code": UNIT_CODES[EnergyUnit(unit)],
        "use_of_energy_balance_code": balance_code,
        "year": year,
        "energy_commodities_code": COMMODITY_CODES,
        "end_use_sector_code": sector_codes,
    }, **request_kwargs)
    return rows_from_api(raw_rows)


def fetch_energy_supply(year: str, unit, **request_kwargs) -> List[EnergyRow]:
    """Supply rows (Production, Imports, Exports, Stock changes, TPES) for a year."""
    return _fetch_balance_side(year, unit, SUPPLY_BALANCE_CODE, SUPPLY_SECTOR_CODES,
                               **request_kwargs)


def fetch_energy_consumption(year: str, unit, **request_kwargs) -> List[EnergyRow]:
    """
    Consumption rows (Industry, Transport, Others, Non-energy use, Final
    consumption) for a year. Includes sub-sector rows; the transform ignores them.
    """
    return _fetch_balance_side(year, unit, CONSUMPTION_BALANCE_CODE, CONSUMPTION_SECTOR_CODES,
                               **request_kwargs)


def fetch_energy_balance(year: str, unit, **request_kwargs) -> Dict[str, List[EnergyRow]]:
    """Both sides of the balance: {"supply": [...], "consumption": [...]}."""
    return {
        "supply": fetch_energy_supply(year, unit, **request_kwargs),
        "consumption": fetch_energy_consumption(year, unit, **request_kwargs),
    }


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Fetch MoSPI energy balance rows for one year")
    parser.add_argument("--year", default="2023-24", help="Fiscal year (default: 2023-24)")
    parser.add_argument("--unit", choices=config.KNOWN_UNITS, default="KToE",
                        help="Energy unit (default: KToE)")
    args = parser.parse_args()

    try:
        balance = fetch_energy_balance(args.year, args.unit)
        print(f"Supply rows:      {len(balance['supply'])}")
        print(f"Consumption rows: {len(balance['consumption'])}")
    except MospiApiError as e:
        print(f"\n✗ Error: {e}")
