"""Free-text vocabulary rules and runtime settings.

The obtain-method strings come from a Spanish wiki, so every rule that
depends on its wording lives in `Vocabulary`. Swap the instance if the
source vocabulary changes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Vocabulary(BaseModel):
    """Keyword and token rules applied to obtain-method text."""

    model_config = ConfigDict(frozen=True)

    separator: str = ": "
    # More listed methods than this and the entity is always capturable
    many_methods_threshold: int = 3
    # Matched against the lower-cased line
    exclusion_keywords: tuple[str, ...] = ("evolucionar", "intercambiar", "parque compi")
    # Matched case-sensitively against ObtainMethod.method
    evolution_marker: str = "Evolucionar"
    # Whitespace token of the location naming the predecessor ("Evolucionar Pidgey")
    evolution_source_token: int = 1


DEFAULT_VOCABULARY = Vocabulary()


class Settings(BaseSettings):
    """Output locations and log level.

    Read from DEXPLANNER_* environment variables or a .env file; paths are
    relative to the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEXPLANNER_",
        env_file=".env",
        extra="ignore",
    )

    data_file: Path = Path("data") / "data.json"
    output_file: Path = Path("output") / "index.html"
    graph_file: Path = Path("output") / "graph.html"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def load_settings() -> Settings:
    return Settings()
