"""
Energy units used by the MoSPI energy balance and the row-level converter.

All embedded figures are stored in KToE; PetaJoules values are derived by
rescaling rows before they reach the balance transform.
"""

from dataclasses import replace
from enum import Enum
from typing import List

# 1 KToE = 0.04187 PetaJoules (published conversion, matches MoSPI figures)
KTOE_TO_PJ = 0.04187


class EnergyUnit(str, Enum):
    KTOE = "KToE"
    PETAJOULES = "PetaJoules"


STORAGE_UNIT = EnergyUnit.KTOE

UNIT_FACTORS = {
    EnergyUnit.KTOE: 1.0,
    EnergyUnit.PETAJOULES: KTOE_TO_PJ,
}


def conversion_factor(unit) -> float:
    """Multiplier that takes a KToE value into ``unit``."""
    return UNIT_FACTORS[EnergyUnit(unit)]


def convert_rows(rows: List, factor: float) -> List:
    """
    Rescale energy rows by a constant factor.

    Every row's ``value`` is multiplied by ``factor``; all other fields are
    carried over untouched. The input rows are not modified.

    Args:
        rows: EnergyRow instances
        factor: Multiplier, e.g. KTOE_TO_PJ

    Returns:
        New list of EnergyRow instances
    """
    return [replace(row, value=row.value * factor) for row in rows]
