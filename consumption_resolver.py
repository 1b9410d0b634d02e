"""
Selects which consumption data feeds the balance transform for a year.

Priority, first match wins:
    1. Verified embedded consumption (energy_data.CONSUMPTION_DATA)
    2. User-supplied override file entry for the year
    3. Proportional estimate from the year's supply (consumption_estimator)
    4. Nothing: empty data tagged "none"

Expected override file format (keyed by fiscal year):
{
  "2022-23": {
    "Coal": {"Industry": 190000, "Transport": 0, "Others": 0,
             "Non-energy use": 0, "Final consumption": 190000},
    ...
  }
}
"""

import json
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from consumption_estimator import estimate_consumption
from energy_data import CONSUMPTION_DATA, SUPPLY_DATA

EMBEDDED = "embedded"
OVERRIDE = "override"
ESTIMATED = "estimated"
NONE = "none"


@dataclass(frozen=True)
class ConsumptionResolution:
    data: Mapping = field(default_factory=dict)
    source: str = NONE


def load_consumption_overrides(path: Optional[str]) -> Dict[str, Any]:
    """
    Load optional consumption overrides.

    A missing file means no overrides. An unreadable file, invalid JSON or a
    top-level value that is not an object is reported as a warning and also
    treated as no overrides. Year entries that are not objects are dropped.

    Args:
        path: Path to the overrides JSON file (empty or None disables it)

    Returns:
        Dictionary of {fiscal year: consumption map}
    """
    if not path:
        return {}

    path_obj = Path(path)
    if not path_obj.exists():
        return {}

    try:
        with open(path_obj, encoding="utf-8") as f:
            parsed = json.load(f)
    except (OSError, ValueError) as e:
        warnings.warn(f"Failed to read {path_obj.name}: {e}. Ignoring consumption overrides.")
        return {}

    if not isinstance(parsed, dict):
        warnings.warn(f"{path_obj.name} is not a JSON object. Ignoring consumption overrides.")
        return {}

    overrides = {}
    for year, consumption_map in parsed.items():
        if isinstance(consumption_map, dict):
            overrides[year] = consumption_map
        else:
            warnings.warn(f"Override entry for {year} is not an object, skipping it.")

    print(f"  Loaded consumption overrides from: {path_obj}")
    return overrides


def _from_embedded(year: str, overrides: Mapping, supply_table: Mapping,
                   consumption_table: Mapping) -> Optional[ConsumptionResolution]:
    data = consumption_table.get(year)
    if data:
        return ConsumptionResolution(data, EMBEDDED)
    return None


def _from_overrides(year: str, overrides: Mapping, supply_table: Mapping,
                    consumption_table: Mapping) -> Optional[ConsumptionResolution]:
    if year in overrides:
        return ConsumptionResolution(overrides[year], OVERRIDE)
    return None


def _from_estimate(year: str, overrides: Mapping, supply_table: Mapping,
                   consumption_table: Mapping) -> Optional[ConsumptionResolution]:
    year_supply = supply_table.get(year)
    if year_supply:
        return ConsumptionResolution(estimate_consumption(year_supply), ESTIMATED)
    return None


RESOLUTION_CHAIN: Sequence[Callable[..., Optional[ConsumptionResolution]]] = (
    _from_embedded,
    _from_overrides,
    _from_estimate,
)


def resolve_consumption(year: str,
                        overrides: Optional[Mapping] = None,
                        supply_table: Mapping = SUPPLY_DATA,
                        consumption_table: Mapping = CONSUMPTION_DATA) -> ConsumptionResolution:
    """
    Pick the consumption data for a fiscal year.

    Args:
        year: Fiscal year string
        overrides: Loaded override entries (see load_consumption_overrides)
        supply_table: Supply figures by year, used for estimation
        consumption_table: Verified consumption figures by year

    Returns:
        ConsumptionResolution with the data and its source tag
        ("embedded", "override", "estimated" or "none")
    """
    overrides = overrides or {}
    for strategy in RESOLUTION_CHAIN:
        resolution = strategy(year, overrides, supply_table, consumption_table)
        if resolution is not None:
            return resolution
    return ConsumptionResolution({}, NONE)
