"""
Load the Sankey data for one fiscal year and unit.

Tries the live MoSPI API first and rebuilds the balance from fresh rows; if
the API fails, the pre-generated static file for the same year and unit is
returned instead. There is no further retry.
"""

import json
import warnings
from pathlib import Path
from typing import Any, Dict, Optional

import config
from energy_transform import transform_energy_balance
from generate_energy_data import artifact_path
from mospi_energy_client import MospiApiError, fetch_energy_balance


def read_energy_balance(path) -> Dict[str, Any]:
    """
    Read a generated energy balance JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path_obj = Path(path)
    if not path_obj.exists():
        raise FileNotFoundError(f"Static energy balance not found: {path_obj}")
    with open(path_obj, encoding="utf-8") as f:
        return json.load(f)


def load_sankey_data(year: str, unit, static_dir: Optional[str] = None) -> Dict[str, Any]:
    """
    Energy balance for one (year, unit), live if possible.

    Args:
        year: Fiscal year string, e.g. "2023-24"
        unit: "KToE" or "PetaJoules"
        static_dir: Directory holding the generated files (defaults to config)

    Returns:
        Energy balance dictionary (nodes, links, unit, year, totalSupply,
        totalConsumption)

    Raises:
        FileNotFoundError: If the live path failed and no static file exists
    """
    try:
        balance = fetch_energy_balance(year, unit)
        return transform_energy_balance(balance["supply"], balance["consumption"], unit, year).to_dict()
    except MospiApiError as e:
        static_dir = static_dir or config.DEFAULT_DATA_PATHS["output_dir"]
        fallback = artifact_path(static_dir, year, unit)
        warnings.warn(f"Live energy balance unavailable ({e}). Using {fallback}.")
        return read_energy_balance(fallback)
