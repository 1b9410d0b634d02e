"""
Flat energy rows and the converters that produce them.

An EnergyRow is one quantity of one commodity flowing through one sector role
in one fiscal year. Supply and consumption maps (embedded, override or
estimated) are flattened into rows here before they reach the balance
transform.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, List, Mapping, Optional

SUPPLY_SECTORS: tuple = ("Production", "Imports")

CONSUMPTION_SECTORS: tuple = (
    "Industry",
    "Transport",
    "Others",
    "Non-energy use",
    "Final consumption",
)


@dataclass(frozen=True)
class EnergyRow:
    year: str
    commodity: str
    sector: str
    value: float
    sub_sector: Optional[str] = None


def is_positive(value: Any) -> bool:
    """True for real numbers strictly greater than zero."""
    return isinstance(value, Real) and not isinstance(value, bool) and value > 0


def supply_rows_for(year: str, supply_map: Optional[Mapping]) -> List[EnergyRow]:
    """
    Flatten a year's supply map into Production / Imports rows.

    Args:
        year: Fiscal year string, e.g. "2023-24"
        supply_map: {commodity: {"Production": value, "Imports": value}}

    Returns:
        One row per (commodity, source) pair with a strictly positive value
    """
    if not supply_map:
        return []

    rows = []
    for commodity, sources in supply_map.items():
        if not isinstance(sources, Mapping):
            continue
        for sector in SUPPLY_SECTORS:
            value = sources.get(sector)
            if is_positive(value):
                rows.append(EnergyRow(year=year, commodity=commodity, sector=sector, value=value))
    return rows


def consumption_rows_for(year: str, consumption_map: Optional[Mapping]) -> List[EnergyRow]:
    """
    Flatten a year's consumption map into sector-level rows.

    Only sector totals are produced here, so ``sub_sector`` is always None.

    Args:
        year: Fiscal year string
        consumption_map: {commodity: {sector role: value}}

    Returns:
        One row per (commodity, sector role) pair with a strictly positive value
    """
    if not consumption_map:
        return []

    rows = []
    for commodity, sector_values in consumption_map.items():
        if not isinstance(sector_values, Mapping):
            continue
        for sector in CONSUMPTION_SECTORS:
            value = sector_values.get(sector)
            if is_positive(value):
                rows.append(EnergyRow(year=year, commodity=commodity, sector=sector, value=value))
    return rows
