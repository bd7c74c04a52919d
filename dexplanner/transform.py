from __future__ import annotations

from collections.abc import Iterable

from dexplanner.config import DEFAULT_VOCABULARY, Vocabulary
from dexplanner.models import EntityRecord, RawRecord
from dexplanner.obtain import is_capturable, parse_obtain_method


def transform_record(raw: RawRecord, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> EntityRecord:
    """Parse a raw record's obtain text and classify it."""
    methods = [parse_obtain_method(line, vocabulary) for line in raw.obtain.split("\n")]
    return EntityRecord(
        name=raw.name,
        number=raw.number,
        link=raw.link,
        obtain=methods,
        capturable=is_capturable(methods, vocabulary),
    )


def transform_all(
    raws: Iterable[RawRecord],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[EntityRecord]:
    return [transform_record(raw, vocabulary) for raw in raws]
