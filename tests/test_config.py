from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from dexplanner.config import DEFAULT_VOCABULARY, Settings, load_settings


def test_default_vocabulary():
    assert DEFAULT_VOCABULARY.separator == ": "
    assert DEFAULT_VOCABULARY.many_methods_threshold == 3
    assert DEFAULT_VOCABULARY.exclusion_keywords == ("evolucionar", "intercambiar", "parque compi")
    assert DEFAULT_VOCABULARY.evolution_marker == "Evolucionar"
    assert DEFAULT_VOCABULARY.evolution_source_token == 1


def test_vocabulary_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_VOCABULARY.separator = " - "


def test_load_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DEXPLANNER_DATA_FILE", str(tmp_path / "dex.json"))
    monkeypatch.setenv("DEXPLANNER_LOG_LEVEL", "DEBUG")

    settings = load_settings()

    assert settings.data_file == tmp_path / "dex.json"
    assert settings.log_level == "DEBUG"
    assert settings.output_file == Settings().output_file
    assert isinstance(settings.graph_file, Path)


def test_settings_read_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEXPLANNER_GRAPH_FILE", raising=False)
    (tmp_path / ".env").write_text(
        "DEXPLANNER_GRAPH_FILE=reports/evolutions.html\nUNRELATED=1\n",
        encoding="utf-8",
    )

    assert load_settings().graph_file == Path("reports") / "evolutions.html"


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("DEXPLANNER_LOG_LEVEL", "info")
    assert load_settings().log_level == "INFO"


def test_invalid_log_level_rejected(monkeypatch):
    monkeypatch.setenv("DEXPLANNER_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        load_settings()
