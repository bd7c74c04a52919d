"""Demand propagation along evolution chains.

Every entity needs one unit of each capturable entity its evolution chain
ends at. `propagate_all` walks the chain of every record in the collection
and accumulates those units in the `needed` field of the capturable ones,
including one unit for each capturable entity itself.

References are resolved by name against the collection. A name that is not
in the collection drops that branch silently.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from dexplanner.config import DEFAULT_VOCABULARY, Vocabulary
from dexplanner.models import EntityRecord

log = logging.getLogger(__name__)


class CyclicDerivationError(ValueError):
    """An evolution chain leads back to an entity already on the chain."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Cyclic derivation: {' -> '.join(cycle)}")


def build_index(records: Sequence[EntityRecord]) -> dict[str, EntityRecord]:
    """Map names to records. The first record with a given name wins."""
    index: dict[str, EntityRecord] = {}
    for record in records:
        index.setdefault(record.name, record)
    return index


def evolution_sources(
    entity: EntityRecord,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[str]:
    """Names of the entities this one evolves from, in method order."""
    names = []
    for item in entity.obtain:
        if vocabulary.evolution_marker not in item.method:
            continue
        if item.location is None:
            continue
        tokens = item.location.split()
        if len(tokens) > vocabulary.evolution_source_token:
            names.append(tokens[vocabulary.evolution_source_token])
    return names


def propagate(
    index: dict[str, EntityRecord],
    entity: EntityRecord,
    counts: Counter[int],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    _chain: tuple[EntityRecord, ...] = (),
) -> None:
    """Add one unit of demand to every capturable terminus of `entity`.

    `counts` is keyed by `id()` of the terminus record, so records sharing
    a name are counted separately.

    Raises:
        CyclicDerivationError: if the chain revisits an entity.
    """
    chain = _chain + (entity,)

    if entity.capturable:
        counts[id(entity)] += 1
        return

    for name in evolution_sources(entity, vocabulary):
        source = index.get(name)
        if source is None:
            log.debug("%s evolves from unknown entity %r, ignoring", entity.name, name)
            continue
        for start, visited in enumerate(chain):
            if visited is source:
                raise CyclicDerivationError([r.name for r in chain[start:]] + [source.name])
        propagate(index, source, counts, vocabulary, chain)


def propagate_all(
    records: Sequence[EntityRecord],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[EntityRecord]:
    """Propagate demand from every record and return the updated collection.

    Counts start from any `needed` already present, so running this twice
    doubles every count.
    """
    index = build_index(records)
    counts: Counter[int] = Counter(
        {id(r): r.needed for r in records if r.needed}
    )

    for record in records:
        propagate(index, record, counts, vocabulary)

    log.info(
        "Propagated demand for %d entities onto %d capturable entities",
        len(records), len(counts),
    )

    updated = []
    for record in records:
        needed = counts.get(id(record), 0)
        if needed:
            record = record.model_copy(update={"needed": needed})
        updated.append(record)
    return updated


def termini(
    index: dict[str, EntityRecord],
    entity: EntityRecord,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[str]:
    """Capturable names `entity` contributes demand to, one entry per path."""
    counts: Counter[int] = Counter()
    propagate(index, entity, counts, vocabulary)
    names = {id(r): r.name for r in index.values()}
    names[id(entity)] = entity.name
    return sorted(names[key] for key in counts.elements())
