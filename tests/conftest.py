from __future__ import annotations

import pytest

from dexplanner.models import EntityRecord, ObtainMethod, RawRecord


def make_record(
    name: str,
    capturable: bool,
    *methods: tuple[str, str | None],
    needed: int | None = None,
) -> EntityRecord:
    return EntityRecord(
        name=name,
        number="000",
        link=f"https://example.org/{name}",
        obtain=[ObtainMethod(method=m, location=loc) for m, loc in methods],
        capturable=capturable,
        needed=needed,
    )


@pytest.fixture
def raw_records() -> list[RawRecord]:
    return [
        RawRecord(
            name="Pidgey",
            number="010",
            link="https://example.org/Pidgey",
            obtain="Pokémon salvaje: Ruta 201\nPokémon salvaje: Ruta 202",
        ),
        RawRecord(
            name="Pidgeotto",
            number="011",
            link="https://example.org/Pidgeotto",
            obtain="Evolucionar: Evolucionar Pidgey",
        ),
        RawRecord(
            name="Pidgeot",
            number="012",
            link="https://example.org/Pidgeot",
            obtain="Evolucionar: Evolucionar Pidgeotto",
        ),
        RawRecord(
            name="Machamp",
            number="068",
            link="https://example.org/Machamp",
            obtain="Intercambiar: Intercambiar Machoke",
        ),
    ]


@pytest.fixture
def pidgey_line() -> list[EntityRecord]:
    return [
        make_record("Pidgey", True, ("Pokémon salvaje", "Ruta 1")),
        make_record("Pidgeotto", False, ("Evolucionar", "Evolucionar Pidgey")),
    ]
