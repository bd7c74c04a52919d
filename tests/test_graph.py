from __future__ import annotations

import networkx as nx
import pytest

from conftest import make_record
from dexplanner.demand import propagate_all
from dexplanner.graph import build_graph, find_cycles, lineage, unresolved_references
from dexplanner.transform import transform_all


def test_build_graph_nodes_and_edges(raw_records):
    records = propagate_all(transform_all(raw_records))
    g = build_graph(records)

    assert set(g.nodes) == {"Pidgey", "Pidgeotto", "Pidgeot", "Machamp"}
    assert set(g.edges) == {("Pidgey", "Pidgeotto"), ("Pidgeotto", "Pidgeot")}
    assert g.edges["Pidgey", "Pidgeotto"]["type"] == "evolves_into"
    assert g.nodes["Pidgey"]["capturable"] is True
    assert g.nodes["Pidgey"]["needed"] == 3
    assert g.nodes["Pidgeot"]["needed"] == 0
    assert g.nodes["Pidgeot"]["obtain"] == ["Evolucionar: Evolucionar Pidgeotto"]


def test_unresolved_references(raw_records):
    records = transform_all(raw_records)
    # Trades are not followed, so Machamp's missing Machoke is not reported
    assert unresolved_references(records) == []

    records.append(make_record("Gallade", False, ("Evolucionar", "Evolucionar Kirlia")))
    assert unresolved_references(records) == [("Gallade", "Kirlia")]


def test_lineage(raw_records):
    g = build_graph(transform_all(raw_records))

    assert lineage(g, "Pidgeot") == ["Pidgey", "Pidgeotto", "Pidgeot"]
    assert lineage(g, "Machamp") == ["Machamp"]
    assert lineage(g, "Missingno") == []


def test_find_cycles():
    records = [
        make_record("A", False, ("Evolucionar", "Evolucionar B")),
        make_record("B", False, ("Evolucionar", "Evolucionar A")),
    ]
    g = build_graph(records)

    cycles = find_cycles(g)
    assert len(cycles) == 1
    assert sorted(cycles[0]) == ["A", "B"]
    with pytest.raises(nx.NetworkXUnfeasible):
        lineage(g, "A")
