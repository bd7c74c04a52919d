"""HTML table report and console summary for an annotated Pokédex."""

from __future__ import annotations

import json
import logging
import webbrowser
from collections.abc import Sequence
from pathlib import Path

from dexplanner.graph import build_graph, find_cycles, unresolved_references
from dexplanner.models import EntityRecord

log = logging.getLogger(__name__)

TABLE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Pokémon Data Table</title>
    <style>
        table {
            border-collapse: collapse;
            width: 100%;
        }
        th, td {
            border: 1px solid black;
            padding: 8px;
            text-align: left;
        }
        th {
            background-color: #f2f2f2;
        }
        button {
            margin-bottom: 10px;
        }
    </style>
</head>
<body>
    <button id="filterButton">Show Only Capturable Pokémon</button>
    <table id="pokemonTable">
        <thead>
            <tr>
                <th>Number</th>
                <th>Name</th>
                <th>Capturable</th>
                <th>Needed</th>
                <th>Obtain Methods</th>
            </tr>
        </thead>
        <tbody id="pokemonTableBody">
        </tbody>
    </table>

    <script>
    const pokemonData = __POKEMON_DATA__;
    let showOnlyCapturable = false;

    function methodText(m) {
        return m.location === undefined ? m.method : `${m.method}: ${m.location}`;
    }

    function populateTable(data) {
        const tableBody = document.getElementById('pokemonTableBody');
        tableBody.innerHTML = '';

        data.forEach(pokemon => {
            if (!showOnlyCapturable || pokemon.capturable) {
                const row = tableBody.insertRow();
                row.insertCell(0).textContent = pokemon.number;
                row.insertCell(1).textContent = pokemon.name;
                row.insertCell(2).textContent = pokemon.capturable ? 'Yes' : 'No';
                row.insertCell(3).textContent = pokemon.needed ? `Needed: ${pokemon.needed}` : '';
                const cell = row.insertCell(4);
                pokemon.obtain.forEach((m, i) => {
                    if (i > 0) cell.appendChild(document.createElement('br'));
                    cell.appendChild(document.createTextNode(methodText(m)));
                });
            }
        });
    }

    document.getElementById('filterButton').addEventListener('click', () => {
        showOnlyCapturable = !showOnlyCapturable;
        document.getElementById('filterButton').textContent =
            showOnlyCapturable ? 'Show All Pokémon' : 'Show Only Capturable Pokémon';
        populateTable(pokemonData);
    });

    populateTable(pokemonData);
    </script>
</body>
</html>
"""


def generate_table_html(records: Sequence[EntityRecord]) -> str:
    """Render a standalone page with a filterable table of the records."""
    data = json.dumps(
        [r.model_dump(exclude_none=True) for r in records],
        ensure_ascii=False,
    )
    # Keep embedded text from closing the script element
    data = data.replace("</", "<\\/")
    return TABLE_TEMPLATE.replace("__POKEMON_DATA__", data)


def write_report(records: Sequence[EntityRecord], output_path: str | Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_table_html(records), encoding="utf-8")
    return output_path


def open_in_browser(path: str | Path) -> bool:
    """Open a local file in the default browser. Returns False if none is available."""
    uri = Path(path).resolve().as_uri()
    opened = webbrowser.open(uri)
    if not opened:
        log.warning("Could not open %s in a browser", uri)
    return opened


def summary_report(records: Sequence[EntityRecord], top: int = 10) -> None:
    """Print capturability and demand statistics for the collection."""
    print("\n=== POKÉDEX SUMMARY ===\n")

    total = len(records)
    print(f"Entities: {total}")
    if total == 0:
        print("  Collection is empty, nothing to report.")
        return

    capturable = [r for r in records if r.capturable]
    print(f"Capturable: {len(capturable)} ({100 * len(capturable) / total:.1f}%)")
    print(f"Total needed: {sum(r.needed or 0 for r in records)}")

    most_needed = sorted(
        (r for r in records if r.needed),
        key=lambda r: (-(r.needed or 0), r.name),
    )[:top]
    if most_needed:
        print("\nMost needed:")
        for r in most_needed:
            print(f"  {r.number:>4} {r.name}: {r.needed}")

    unresolved = unresolved_references(records)
    print(f"\nUnresolved evolution references: {len(unresolved)}")
    for name, missing in unresolved:
        print(f"  - {name} evolves from {missing} (not in collection)")

    cycles = find_cycles(build_graph(records))
    if cycles:
        print(f"\nWARNING: {len(cycles)} evolution cycle(s):")
        for cycle in cycles:
            print(f"  {' -> '.join(cycle + cycle[:1])}")
