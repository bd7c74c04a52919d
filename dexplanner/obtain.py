"""Parsing and classification of free-text obtain methods."""

from __future__ import annotations

from collections.abc import Sequence

from dexplanner.config import DEFAULT_VOCABULARY, Vocabulary
from dexplanner.models import ObtainMethod


def parse_obtain_method(line: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> ObtainMethod:
    """Split a line on its first separator into method and location.

    A line without the separator becomes a method with no location.
    """
    method, found, location = line.partition(vocabulary.separator)
    if not found:
        return ObtainMethod(method=line)
    return ObtainMethod(method=method, location=location)


def is_exclusionary(method: ObtainMethod, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> bool:
    """True if the method only refers to evolving or trading for the entity."""
    text = method.text.lower()
    return any(keyword in text for keyword in vocabulary.exclusion_keywords)


def is_capturable(
    methods: Sequence[ObtainMethod],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> bool:
    """Decide whether an entity can be obtained directly.

    Entities listing many methods are always capturable. Otherwise at least
    one method must be something other than evolution or trade, so an empty
    list is not capturable.
    """
    if len(methods) > vocabulary.many_methods_threshold:
        return True
    return any(not is_exclusionary(m, vocabulary) for m in methods)
