from __future__ import annotations

from collections.abc import Sequence

import networkx as nx

from dexplanner.config import DEFAULT_VOCABULARY, Vocabulary
from dexplanner.demand import build_index, evolution_sources
from dexplanner.models import EntityRecord


def build_graph(
    records: Sequence[EntityRecord],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> nx.DiGraph:
    """Build a directed evolution graph: edges point from predecessor to evolution."""
    g = nx.DiGraph()
    index = build_index(records)

    for record in index.values():
        g.add_node(
            record.name,
            number=record.number,
            link=record.link,
            capturable=record.capturable,
            needed=record.needed or 0,
            obtain=[m.text for m in record.obtain],
        )

    for record in index.values():
        for name in evolution_sources(record, vocabulary):
            # Only add edge if the predecessor is in the collection
            if name in index:
                g.add_edge(name, record.name, type="evolves_into")

    return g


def unresolved_references(
    records: Sequence[EntityRecord],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[tuple[str, str]]:
    """(entity, missing predecessor) pairs for references outside the collection."""
    names = {r.name for r in records}
    return [
        (record.name, name)
        for record in records
        for name in evolution_sources(record, vocabulary)
        if name not in names
    ]


def find_cycles(g: nx.DiGraph) -> list[list[str]]:
    return [list(cycle) for cycle in nx.simple_cycles(g)]


def lineage(g: nx.DiGraph, name: str) -> list[str]:
    """Ancestors of `name` ordered from the earliest stage, ending with `name`.

    Raises networkx.NetworkXUnfeasible if the lineage contains a cycle.
    """
    if name not in g:
        return []
    nodes = nx.ancestors(g, name) | {name}
    return list(nx.topological_sort(g.subgraph(nodes)))
