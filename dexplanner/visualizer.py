from __future__ import annotations

from pathlib import Path

import networkx as nx
from pyvis.network import Network

CAPTURABLE_COLOR = "#2ECC71"
EVOLUTION_ONLY_COLOR = "#E67E22"


def generate_visualization(g: nx.DiGraph, output_path: str | Path = "graph.html") -> str:
    """Generate an interactive Pyvis HTML view of the evolution graph."""
    net = Network(
        height="800px",
        width="100%",
        directed=True,
        bgcolor="#1a1a2e",
        font_color="#e0e0e0",
        cdn_resources="remote",
    )

    # Evolution chains read best top-down
    net.set_options("""
    {
        "layout": {
            "hierarchical": {
                "enabled": true,
                "direction": "UD",
                "sortMethod": "directed",
                "levelSeparation": 120
            }
        },
        "physics": {
            "enabled": false
        },
        "nodes": {
            "font": {
                "size": 14,
                "face": "Inter, system-ui, sans-serif"
            },
            "borderWidth": 2,
            "borderWidthSelected": 4
        },
        "edges": {
            "arrows": {
                "to": {"enabled": true, "scaleFactor": 0.8}
            },
            "color": {
                "color": "#555577",
                "highlight": "#FFD700"
            }
        },
        "interaction": {
            "hover": true,
            "tooltipDelay": 100,
            "navigationButtons": true,
            "keyboard": true
        }
    }
    """)

    for name, data in g.nodes(data=True):
        capturable = data.get("capturable", False)
        needed = data.get("needed", 0)
        color = CAPTURABLE_COLOR if capturable else EVOLUTION_ONLY_COLOR

        # Build tooltip
        obtain_lines = "".join(f"<br>{line}" for line in data.get("obtain", []))
        needed_info = f"<br><b>Needed:</b> {needed}" if needed else ""
        title = (
            f"<b>#{data.get('number', '?')} {name}</b>"
            f"<br><i>{'Capturable' if capturable else 'Evolution/trade only'}</i>"
            f"{needed_info}<br>{obtain_lines}"
        )

        # Scale node size by demand
        size = max(15, min(40, 15 + needed * 3))

        net.add_node(
            name,
            label=name,
            title=title,
            color=color,
            size=size,
            shape="dot",
        )

    for src, tgt, data in g.edges(data=True):
        net.add_edge(src, tgt, title=data.get("type", ""))

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    net.save_graph(str(output_path))

    # Read and return the HTML content
    return output_path.read_text(encoding="utf-8")
