"""
Unit Tests for the Energy Balance Transform

Covers link construction, totals, crude oil handling, positivity and the
verified 2023-24 scenario.
"""

import json

import pytest

from energy_rows import EnergyRow
from energy_topology import END_USE_IDS, NODE_INDEX, SANKEY_NODES, NodeId
from energy_transform import transform_energy_balance
from energy_units import KTOE_TO_PJ, convert_rows


def _links_by_pair(balance):
    return {(link.source, link.target): link for link in balance.links}


def _pair(source_id, target_id):
    return NODE_INDEX[source_id], NODE_INDEX[target_id]


class TestVerifiedYear:
    """The verified 2023-24 balance in KToE."""

    @pytest.fixture
    def balance(self, supply_rows_2023, consumption_rows_2023):
        return transform_energy_balance(supply_rows_2023, consumption_rows_2023, "KToE", "2023-24")

    def test_coal_to_electricity_generation(self, balance):
        link = _links_by_pair(balance)[_pair(NodeId.COAL, NodeId.ELECTRICITY_GEN)]
        assert link.value == pytest.approx(545438.28 - 200947.38)
        assert link.value == pytest.approx(344490.90)

    def test_total_consumption_uses_final_consumption_rows(self, balance):
        expected = 200947.38 + 39687.34 + 1584.87 + 252286.30 + 132698
        assert balance.total_consumption == pytest.approx(expected)

    def test_total_supply_is_production_plus_imports(self, balance):
        expected = (
            403799.46 + 141638.82 + 30002.27 + 239414.80 + 33704.73 + 29410.30
            + 11558.82 + 12492.78 + 20288.67 + 9786.09 + 11.88 + 48202.82 + 571.79
        )
        assert balance.total_supply == pytest.approx(expected)

    def test_supply_exceeds_consumption(self, balance):
        assert balance.total_supply >= balance.total_consumption

    def test_link_count(self, balance):
        # 13 supply, 13 end-use, crude -> oil products, 6 fuels, generation -> electricity
        assert len(balance.links) == 34

    def test_crude_oil_fully_refined(self, balance):
        link = _links_by_pair(balance)[_pair(NodeId.CRUDE_OIL, NodeId.OIL_PRODUCTS)]
        assert link.value == pytest.approx(30002.27 + 239414.80)

    def test_generation_to_electricity_uses_final_electricity(self, balance):
        link = _links_by_pair(balance)[_pair(NodeId.ELECTRICITY_GEN, NodeId.ELECTRICITY)]
        assert link.value == pytest.approx(55470 + 2838 + 74390)

    def test_link_label_and_color(self, balance):
        link = _links_by_pair(balance)[_pair(NodeId.PRODUCTION, NodeId.COAL)]
        assert link.value == 403799.46
        assert link.label == "Production → Coal"
        assert link.color == "rgba(255,153,51,0.3)"

    def test_nodes_are_fixed(self, balance):
        assert len(balance.nodes) == 16
        assert [node.column for node in balance.nodes] == [0] * 2 + [1] * 7 + [2] * 3 + [3] * 4
        assert balance.nodes == list(SANKEY_NODES)

    def test_serialized_shape(self, balance):
        data = balance.to_dict()
        assert set(data) == {"nodes", "links", "unit", "year", "totalSupply", "totalConsumption"}
        assert data["unit"] == "KToE"
        assert data["year"] == "2023-24"
        assert data["nodes"][0] == {
            "id": "production",
            "label": "Production",
            "color": "rgba(255,153,51,0.8)",
            "column": 0,
        }
        assert set(data["links"][0]) == {"source", "target", "value", "color", "label"}


class TestTransformProperties:

    def test_idempotent(self, supply_rows_2023, consumption_rows_2023):
        first = transform_energy_balance(supply_rows_2023, consumption_rows_2023, "KToE", "2023-24")
        second = transform_energy_balance(supply_rows_2023, consumption_rows_2023, "KToE", "2023-24")
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_unit_equivariance(self, supply_rows_2023, consumption_rows_2023):
        ktoe = transform_energy_balance(supply_rows_2023, consumption_rows_2023, "KToE", "2023-24")
        pj = transform_energy_balance(
            convert_rows(supply_rows_2023, KTOE_TO_PJ),
            convert_rows(consumption_rows_2023, KTOE_TO_PJ),
            "PetaJoules",
            "2023-24",
        )

        assert pj.unit.value == "PetaJoules"
        assert [(l.source, l.target) for l in pj.links] == [(l.source, l.target) for l in ktoe.links]
        for pj_link, ktoe_link in zip(pj.links, ktoe.links):
            assert pj_link.value == pytest.approx(ktoe_link.value * KTOE_TO_PJ, rel=1e-9)
        assert pj.total_supply == pytest.approx(ktoe.total_supply * KTOE_TO_PJ, rel=1e-9)

    def test_all_links_positive(self, make_row):
        supply = [
            make_row("Coal", "Production", 100),
            make_row("Coal", "Imports", 0),
            make_row("Natural Gas", "Production", -5),
        ]
        consumption = [
            make_row("Coal", "Industry", 100),
            make_row("Natural Gas", "Transport", 0),
        ]
        balance = transform_energy_balance(supply, consumption, "KToE", "2023-24")
        assert balance.links
        assert all(link.value > 0 for link in balance.links)

    def test_empty_input_still_succeeds(self):
        balance = transform_energy_balance([], [], "KToE", "2012-13")
        assert balance.links == []
        assert balance.total_supply == 0
        assert balance.total_consumption == 0
        assert len(balance.nodes) == 16


class TestEdgeCases:

    def test_crude_oil_consumption_never_reaches_end_use(self, make_row):
        supply = [make_row("Crude Oil", "Production", 1000)]
        consumption = [
            make_row("Crude Oil", "Industry", 500),
            make_row("Crude Oil", "Final consumption", 500),
        ]
        balance = transform_energy_balance(supply, consumption, "KToE", "2023-24")

        crude_idx = NODE_INDEX[NodeId.CRUDE_OIL]
        end_use = {NODE_INDEX[node_id] for node_id in END_USE_IDS}
        assert not [l for l in balance.links if l.source == crude_idx and l.target in end_use]
        crude_links = [l for l in balance.links if l.source == crude_idx]
        assert [(l.target, l.value) for l in crude_links] == [(NODE_INDEX[NodeId.OIL_PRODUCTS], 1000)]
        # Final consumption rows still count towards the total
        assert balance.total_consumption == 500

    def test_unknown_names_are_skipped(self, make_row):
        supply = [
            make_row("Firewood", "Production", 10),
            make_row("Coal", "Exports", 10),
            make_row("Coal", "Production", 10),
        ]
        consumption = [
            make_row("Firewood", "Industry", 5),
            make_row("Coal", "Agriculture", 5),
        ]
        balance = transform_energy_balance(supply, consumption, "KToE", "2023-24")
        assert [(l.source, l.target) for l in balance.links] == [
            _pair(NodeId.PRODUCTION, NodeId.COAL),
            _pair(NodeId.COAL, NodeId.ELECTRICITY_GEN),
        ]

    def test_sub_sector_rows_are_ignored(self, make_row):
        consumption = [
            make_row("Coal", "Industry", 40, sub_sector="Iron and steel"),
            make_row("Coal", "Final consumption", 40, sub_sector="Iron and steel"),
        ]
        balance = transform_energy_balance([], consumption, "KToE", "2023-24")
        assert balance.links == []
        assert balance.total_consumption == 0

    def test_repeated_rows_sum_into_one_link(self, make_row):
        supply = [
            make_row("Coal", "Production", 100),
            make_row("Coal", "Production", 50),
        ]
        consumption = [
            make_row("Coal", "Industry", 30),
            make_row("Coal", "Industry", 20),
        ]
        balance = transform_energy_balance(supply, consumption, "KToE", "2023-24")
        links = _links_by_pair(balance)

        assert len(balance.links) == 3
        assert links[_pair(NodeId.PRODUCTION, NodeId.COAL)].value == 150
        assert links[_pair(NodeId.COAL, NodeId.INDUSTRY)].value == 50
        assert links[_pair(NodeId.COAL, NodeId.ELECTRICITY_GEN)].value == 100

    def test_fuel_with_no_residual_has_no_generation_link(self, make_row):
        supply = [make_row("Coal", "Production", 100)]
        consumption = [make_row("Coal", "Industry", 150)]
        balance = transform_energy_balance(supply, consumption, "KToE", "2023-24")
        assert _pair(NodeId.COAL, NodeId.ELECTRICITY_GEN) not in _links_by_pair(balance)

    def test_oil_products_do_not_feed_generation(self, make_row):
        supply = [make_row("Oil Products", "Imports", 100)]
        balance = transform_energy_balance(supply, [], "KToE", "2023-24")
        assert _pair(NodeId.OIL_PRODUCTS, NodeId.ELECTRICITY_GEN) not in _links_by_pair(balance)

    def test_total_consumption_falls_back_to_sector_sums(self, make_row):
        consumption = [
            make_row("Coal", "Industry", 30),
            make_row("Electricity", "Others", 20),
            make_row("Crude Oil", "Industry", 99),
        ]
        balance = transform_energy_balance([], consumption, "KToE", "2023-24")
        assert balance.total_consumption == 50

    def test_solar_synonyms_share_a_node(self, make_row):
        supply = [
            make_row("Solar, Wind, Others", "Production", 10),
            make_row("Solar/Wind/Others", "Production", 5),
        ]
        balance = transform_energy_balance(supply, [], "KToE", "2023-24")
        links = _links_by_pair(balance)
        assert links[_pair(NodeId.PRODUCTION, NodeId.SOLAR_WIND_OTHERS)].value == 15
        assert links[_pair(NodeId.SOLAR_WIND_OTHERS, NodeId.ELECTRICITY_GEN)].value == 15

    def test_rows_are_not_mutated(self, make_row):
        row = make_row("Coal", "Production", 100)
        transform_energy_balance([row], [], "KToE", "2023-24")
        assert row == EnergyRow("2023-24", "Coal", "Production", 100)
