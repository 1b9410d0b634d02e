"""
Energy Balance Transform

Turns flat MoSPI energy balance rows for one fiscal year and unit into the
Sankey structure rendered by the dashboard: the fixed 16-node list, the
weighted links between them, and the supply / consumption totals.

The transform runs in four steps:
1. Supply links: Production / Imports -> primary commodity
2. Consumption links: commodity -> end-use sector (sector-level rows only)
3. Transformation links: crude oil -> oil products, fuels -> electricity
   generation, electricity generation -> electricity
4. Drop any link whose value is not strictly positive

Each (source, target) pair appears at most once; repeated rows for the same
pair are summed into a single link. Unknown commodity or sector names are skipped, never raised.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from energy_rows import EnergyRow, is_positive
from energy_topology import (
    ELECTRICITY_FUEL_IDS,
    NODE_INDEX,
    SANKEY_NODES,
    FlowNode,
    NodeId,
    commodity_to_node_id,
    node_for,
    sector_to_node_id,
    source_to_node_id,
    with_alpha,
)
from energy_units import EnergyUnit

LINK_ALPHA = 0.3


@dataclass(frozen=True)
class FlowEdge:
    source: int
    target: int
    value: float
    color: str
    label: str

    def to_dict(self) -> Dict:
        return {
            "source": self.source,
            "target": self.target,
            "value": self.value,
            "color": self.color,
            "label": self.label,
        }


@dataclass(frozen=True)
class EnergyBalance:
    nodes: List[FlowNode]
    links: List[FlowEdge]
    unit: EnergyUnit
    year: str
    total_supply: float
    total_consumption: float

    def to_dict(self) -> Dict:
        """Serializable form, keyed the way the dashboard reads it."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links],
            "unit": self.unit.value,
            "year": self.year,
            "totalSupply": self.total_supply,
            "totalConsumption": self.total_consumption,
        }


def make_link(source_id: NodeId, target_id: NodeId, value: float) -> FlowEdge:
    """Link colored after its source node, labelled "Source → Target"."""
    source_node = node_for(source_id)
    target_node = node_for(target_id)
    return FlowEdge(
        source=NODE_INDEX[source_id],
        target=NODE_INDEX[target_id],
        value=value,
        color=with_alpha(source_node.color, LINK_ALPHA),
        label=f"{source_node.label} → {target_node.label}",
    )


def add_flow(flows: Dict[Tuple[NodeId, NodeId], float],
             source_id: NodeId, target_id: NodeId, value: float) -> None:
    """Accumulate a flow; repeated (source, target) pairs sum into one link."""
    key = (source_id, target_id)
    flows[key] = flows.get(key, 0.0) + value


def _is_sector_total(row: EnergyRow) -> bool:
    return row.sub_sector is None and is_positive(row.value)


def total_final_consumption(consumption_rows: Iterable[EnergyRow],
                            commodity_final_consumption: Dict[NodeId, float]) -> float:
    """
    Total final consumption for the balance.

    Prefers the sum of the "Final consumption" sector rows; falls back to the
    per-commodity sector totals when the input has none.
    """
    final_rows = [
        row.value for row in consumption_rows
        if row.sector == "Final consumption" and _is_sector_total(row)
    ]
    if final_rows:
        return sum(final_rows)
    return sum(commodity_final_consumption.values())


def transform_energy_balance(supply_rows: Iterable[EnergyRow],
                             consumption_rows: Iterable[EnergyRow],
                             unit,
                             year: str) -> EnergyBalance:
    """
    Build the Sankey flow graph for one fiscal year and unit.

    Args:
        supply_rows: Supply-side rows (sectors Production, Imports; others such
            as Exports or Stock changes are ignored)
        consumption_rows: Consumption-side rows (sectors Industry, Transport,
            Others, Non-energy use, Final consumption)
        unit: "KToE" or "PetaJoules" (the rows must already be in this unit)
        year: Fiscal year string, e.g. "2023-24"

    Returns:
        EnergyBalance with the fixed nodes, positive links and totals
    """
    supply_rows = list(supply_rows)
    consumption_rows = list(consumption_rows)

    flows: Dict[Tuple[NodeId, NodeId], float] = {}
    commodity_supply: Dict[NodeId, float] = {node_id: 0.0 for node_id in NodeId}
    commodity_final_consumption: Dict[NodeId, float] = {node_id: 0.0 for node_id in NodeId}

    # Step 1: source -> primary commodity
    total_supply = 0.0
    for row in supply_rows:
        if not is_positive(row.value):
            continue

        commodity_id = commodity_to_node_id(row.commodity)
        if commodity_id is None:
            continue

        source_id = source_to_node_id(row.sector)
        if source_id is None:
            continue

        add_flow(flows, source_id, commodity_id, row.value)
        commodity_supply[commodity_id] += row.value

        if source_id is NodeId.PRODUCTION:
            total_supply += row.value

    # Imports complete the primary supply figure (production + imports)
    for row in supply_rows:
        if row.sector == "Imports" and is_positive(row.value):
            total_supply += row.value

    # Step 2: commodity -> end-use sector
    for row in consumption_rows:
        if not _is_sector_total(row):
            continue

        sector_id = sector_to_node_id(row.sector)
        if sector_id is None:
            continue

        commodity_id = commodity_to_node_id(row.commodity)
        if commodity_id is None:
            continue

        # Crude oil reaches end use only through oil products
        if commodity_id is NodeId.CRUDE_OIL:
            continue

        add_flow(flows, commodity_id, sector_id, row.value)
        commodity_final_consumption[commodity_id] += row.value

    total_consumption = total_final_consumption(consumption_rows, commodity_final_consumption)

    # Step 3: transformation
    crude_oil_total = commodity_supply[NodeId.CRUDE_OIL]
    if crude_oil_total > 0:
        add_flow(flows, NodeId.CRUDE_OIL, NodeId.OIL_PRODUCTS, crude_oil_total)

    # Whatever a fuel does not deliver directly to end use goes to generation
    for fuel_id in ELECTRICITY_FUEL_IDS:
        to_electricity_gen = commodity_supply[fuel_id] - commodity_final_consumption[fuel_id]
        if to_electricity_gen <= 0:
            continue
        add_flow(flows, fuel_id, NodeId.ELECTRICITY_GEN, to_electricity_gen)

    # No loss model: generation output is taken to equal final electricity use
    electricity_final = commodity_final_consumption[NodeId.ELECTRICITY]
    if electricity_final > 0:
        add_flow(flows, NodeId.ELECTRICITY_GEN, NodeId.ELECTRICITY, electricity_final)

    # Step 4
    links = [
        make_link(source_id, target_id, value)
        for (source_id, target_id), value in flows.items()
        if value > 0
    ]

    return EnergyBalance(
        nodes=list(SANKEY_NODES),
        links=links,
        unit=EnergyUnit(unit),
        year=year,
        total_supply=total_supply,
        total_consumption=total_consumption,
    )
