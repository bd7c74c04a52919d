from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


# --- Records ---


class ObtainMethod(BaseModel):
    """One way of acquiring an entity, split into method and location."""

    model_config = ConfigDict(frozen=True)

    method: str
    location: str | None = None

    @property
    def text(self) -> str:
        """The line this method was parsed from."""
        if self.location is None:
            return self.method
        return f"{self.method}: {self.location}"


class RawRecord(BaseModel):
    """A record as produced by the upstream data source."""

    model_config = ConfigDict(frozen=True)

    name: str
    number: str
    link: str
    obtain: str  # newline-joined obtain-method lines


class EntityRecord(BaseModel):
    """A record after classification, optionally carrying propagated demand."""

    model_config = ConfigDict(frozen=True)

    name: str
    number: str
    link: str
    obtain: list[ObtainMethod]
    capturable: bool
    needed: int | None = Field(default=None, ge=0)  # None = never required


# --- Persisted document ---


class PokedexMetadata(BaseModel):
    source: str = ""
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    entity_count: int = 0
    capturable_count: int = 0
    total_needed: int = 0
    unresolved_references: int = 0


class Pokedex(BaseModel):
    records: list[EntityRecord]
    metadata: PokedexMetadata = Field(default_factory=PokedexMetadata)
