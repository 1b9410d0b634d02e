"""
Fixed Sankey topology for India's energy balance.

- Defines the 16 flow nodes (id, display label, RGBA color, column).
- Maps MoSPI commodity and end-use sector names onto node ids.
- Lists the primary fuels that feed electricity generation.

Columns encode the pipeline stage:
    0 = source (Production, Imports)
    1 = primary commodity
    2 = transformation (refining, generation)
    3 = end-use sector

The node set never changes between years or units; only link values do.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class NodeId(str, Enum):
    PRODUCTION = "production"
    IMPORTS = "imports"
    COAL = "coal"
    CRUDE_OIL = "crude_oil"
    NATURAL_GAS = "natural_gas"
    HYDRO = "hydro"
    NUCLEAR = "nuclear"
    SOLAR_WIND_OTHERS = "solar_wind_others"
    LIGNITE = "lignite"
    OIL_PRODUCTS = "oil_products"
    ELECTRICITY_GEN = "electricity_gen"
    ELECTRICITY = "electricity"
    INDUSTRY = "industry"
    TRANSPORT = "transport"
    OTHERS = "others"
    NON_ENERGY_USE = "non_energy_use"


@dataclass(frozen=True)
class FlowNode:
    id: NodeId
    label: str
    color: str
    column: int

    def to_dict(self) -> Dict:
        return {
            "id": self.id.value,
            "label": self.label,
            "color": self.color,
            "column": self.column,
        }


SANKEY_NODES: Tuple[FlowNode, ...] = (
    # Column 0 - Sources
    FlowNode(NodeId.PRODUCTION, "Production", "rgba(255,153,51,0.8)", 0),
    FlowNode(NodeId.IMPORTS, "Imports", "rgba(0,0,128,0.8)", 0),

    # Column 1 - Primary energy
    FlowNode(NodeId.COAL, "Coal", "rgba(74,74,74,0.8)", 1),
    FlowNode(NodeId.CRUDE_OIL, "Crude Oil", "rgba(139,69,19,0.8)", 1),
    FlowNode(NodeId.NATURAL_GAS, "Natural Gas", "rgba(135,206,235,0.8)", 1),
    FlowNode(NodeId.HYDRO, "Hydro", "rgba(70,130,180,0.8)", 1),
    FlowNode(NodeId.NUCLEAR, "Nuclear", "rgba(255,99,71,0.8)", 1),
    FlowNode(NodeId.SOLAR_WIND_OTHERS, "Solar/Wind/Others", "rgba(255,215,0,0.8)", 1),
    FlowNode(NodeId.LIGNITE, "Lignite", "rgba(160,82,45,0.8)", 1),

    # Column 2 - Transformation
    FlowNode(NodeId.OIL_PRODUCTS, "Oil Products", "rgba(210,105,30,0.8)", 2),
    FlowNode(NodeId.ELECTRICITY_GEN, "Electricity Generation", "rgba(241,196,15,0.8)", 2),
    FlowNode(NodeId.ELECTRICITY, "Electricity", "rgba(241,196,15,0.8)", 2),

    # Column 3 - End-use sectors
    FlowNode(NodeId.INDUSTRY, "Industry", "rgba(255,153,51,0.6)", 3),
    FlowNode(NodeId.TRANSPORT, "Transport", "rgba(155,89,182,0.6)", 3),
    FlowNode(NodeId.OTHERS, "Others", "rgba(46,204,113,0.6)", 3),
    FlowNode(NodeId.NON_ENERGY_USE, "Non-energy Use", "rgba(52,152,219,0.6)", 3),
)

# Position of each node in SANKEY_NODES (links refer to nodes by index)
NODE_INDEX: Dict[NodeId, int] = {node.id: i for i, node in enumerate(SANKEY_NODES)}

# MoSPI commodity names, including the spellings seen across API and tool exports
COMMODITY_NODE_IDS: Dict[str, NodeId] = {
    "Coal": NodeId.COAL,
    "Crude Oil": NodeId.CRUDE_OIL,
    "Natural Gas": NodeId.NATURAL_GAS,
    "Hydro": NodeId.HYDRO,
    "Nuclear": NodeId.NUCLEAR,
    "Solar, Wind, Others": NodeId.SOLAR_WIND_OTHERS,
    "Solar/Wind/Others": NodeId.SOLAR_WIND_OTHERS,
    "Lignite": NodeId.LIGNITE,
    "Oil Products": NodeId.OIL_PRODUCTS,
    "Electricity": NodeId.ELECTRICITY,
}

# MoSPI end-use sector names (consumption side)
SECTOR_NODE_IDS: Dict[str, NodeId] = {
    "Industry": NodeId.INDUSTRY,
    "Transport": NodeId.TRANSPORT,
    "Others": NodeId.OTHERS,
    "Non-energy use": NodeId.NON_ENERGY_USE,
    "Non-energy Use": NodeId.NON_ENERGY_USE,
}

# Supply-side sector names that become source nodes
SOURCE_NODE_IDS: Dict[str, NodeId] = {
    "Production": NodeId.PRODUCTION,
    "Imports": NodeId.IMPORTS,
}

# Primary fuels feeding electricity generation, in link emission order.
# Oil products and crude oil are excluded.
ELECTRICITY_FUEL_IDS: Tuple[NodeId, ...] = (
    NodeId.COAL,
    NodeId.LIGNITE,
    NodeId.NATURAL_GAS,
    NodeId.HYDRO,
    NodeId.NUCLEAR,
    NodeId.SOLAR_WIND_OTHERS,
)

END_USE_IDS: Tuple[NodeId, ...] = tuple(node.id for node in SANKEY_NODES if node.column == 3)

_ALPHA_PATTERN = re.compile(r"[\d.]+\)$")


def node_for(node_id: NodeId) -> FlowNode:
    return SANKEY_NODES[NODE_INDEX[node_id]]


def commodity_to_node_id(name: str) -> Optional[NodeId]:
    """Return the node id for a MoSPI commodity name, or None if unrecognized."""
    return COMMODITY_NODE_IDS.get(name)


def sector_to_node_id(name: str) -> Optional[NodeId]:
    """Return the end-use node id for a consumption sector name, or None if unrecognized."""
    return SECTOR_NODE_IDS.get(name)


def source_to_node_id(name: str) -> Optional[NodeId]:
    """Return the source node id for "Production" / "Imports", or None."""
    return SOURCE_NODE_IDS.get(name)


def with_alpha(rgba: str, alpha: float) -> str:
    """Replace the alpha channel of an ``rgba(r,g,b,a)`` color string."""
    return _ALPHA_PATTERN.sub(f"{alpha})", rgba)
