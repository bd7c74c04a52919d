"""Reading raw records and persisting the annotated Pokédex.

File layout:
    data/
    └── data.json     # {"records": [...], "metadata": {...}}

Raw input is a JSON array of {name, number, link, obtain} objects, the
shape the upstream scraper writes.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from dexplanner.graph import unresolved_references
from dexplanner.models import EntityRecord, Pokedex, PokedexMetadata, RawRecord


def load_raw_records(path: str | Path) -> list[RawRecord]:
    """Load upstream raw records from a JSON array."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Raw records not found: {path}")

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of records in {path}")
    return [RawRecord(**item) for item in data]


def build_metadata(records: Sequence[EntityRecord], source: str = "") -> PokedexMetadata:
    return PokedexMetadata(
        source=source,
        entity_count=len(records),
        capturable_count=sum(1 for r in records if r.capturable),
        total_needed=sum(r.needed or 0 for r in records),
        unresolved_references=len(unresolved_references(records)),
    )


def save_pokedex(
    records: Sequence[EntityRecord],
    path: str | Path,
    source: str = "",
) -> Path:
    """Write annotated records with summary metadata.

    Unset optional fields (`needed`, `location`) are left out of the file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    pokedex = Pokedex(records=list(records), metadata=build_metadata(records, source))
    _write_json(path, pokedex.model_dump(exclude_none=True))
    return path


def load_pokedex(path: str | Path) -> Pokedex:
    """Load a saved Pokédex.

    A bare JSON array of annotated records is accepted as well.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    data = json.loads(path.read_text(encoding="utf-8"))

    # Handle both the Pokedex document and a bare list of records
    if isinstance(data, list):
        records = [EntityRecord(**item) for item in data]
        return Pokedex(records=records, metadata=build_metadata(records, str(path)))
    return Pokedex(**data)


def _write_json(path: Path, data) -> None:
    """Write JSON with consistent formatting."""
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False, default=str),
        encoding="utf-8",
    )
