# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration models and layered loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from ruffqa.config import Config, ConfigError, load_config
from ruffqa.config.loader import default_sources, load_from_sources
from ruffqa.config.loaders import MappingConfigSource, PyProjectConfigSource
from ruffqa.core.severity import Classification
from ruffqa.errors import RuffQAError


def test_defaults() -> None:
    config = Config()

    assert config.state is True
    assert config.executable == "ruff"
    assert config.use_noqa is True
    assert config.mark_uncategorized is True
    assert config.allow_interactive is False
    assert config.severity.error == ("E", "F")
    assert config.severity.warning == ("W",)
    assert config.execution.timeout == 100.0
    assert config.execution.max_output_bytes == 100 * 1024 * 1024


def test_comma_separated_lists_are_split() -> None:
    config = Config(select="E, F,,W", severity={"info": "D,  N"})

    assert config.select == ("E", "F", "W")
    assert config.severity.info == ("D", "N")


def test_assignment_is_validated() -> None:
    config = Config()

    config.ignore = "E501,E402"
    assert config.ignore == ("E501", "E402")
    with pytest.raises(ValueError):
        config.executable = "   "


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValueError):
        Config.model_validate({"lintOnChange": True})


def test_classifier_uses_configured_prefixes() -> None:
    classifier = Config(severity={"error": [], "warning": ["E"], "info": ["F"]}).classifier()

    assert classifier.classify("E501") is Classification.WARNING
    assert classifier.classify("F401") is Classification.INFO


def test_process_options_follow_execution_limits(tmp_path: Path) -> None:
    options = Config(execution={"timeout": 5, "max_output_bytes": 2048}).process_options(tmp_path)

    assert options.cwd == tmp_path
    assert options.timeout == 5
    assert options.max_output_bytes == 2048


def test_layering_precedence(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[tool.ruffqa]
executable = "/opt/ruff"
select = ["E", "F"]
target_version = "py311"

[tool.ruffqa.severity]
warning = ["W", "C90"]
""".strip(),
        encoding="utf-8",
    )
    (tmp_path / ".ruffqa.toml").write_text(
        """
select = "E,F,B"

[severity]
info = ["D"]
""".strip(),
        encoding="utf-8",
    )

    config = load_config(tmp_path, {"target_version": "py313"})

    assert config.executable == "/opt/ruff"
    assert config.select == ("E", "F", "B")
    assert config.target_version == "py313"
    assert config.severity.warning == ("W", "C90")
    assert config.severity.info == ("D",)
    assert config.severity.error == ("E", "F")


def test_missing_files_fall_back_to_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == Config()


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert PyProjectConfigSource(path).load() == {}


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".ruffqa.toml").write_text("select = [", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_invalid_values_raise_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(tmp_path, {"execution": {"timeout": 0}})


def test_config_error_shares_the_package_error_root(tmp_path: Path) -> None:
    (tmp_path / ".ruffqa.toml").write_text("select = [", encoding="utf-8")

    with pytest.raises(RuffQAError):
        load_config(tmp_path)


def test_non_table_section_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool]\nruffqa = "yes"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a table"):
        load_config(tmp_path)


def test_overrides_source_is_appended_last(tmp_path: Path) -> None:
    sources = default_sources(tmp_path, {"state": False})

    assert isinstance(sources[-1], MappingConfigSource)
    assert load_from_sources(sources).state is False
    assert not any(isinstance(source, MappingConfigSource) for source in default_sources(tmp_path))


def test_to_dict_is_json_compatible() -> None:
    payload = Config(config_path=Path("/tmp/ruff.toml"), select=["E"]).to_dict()

    assert payload["config_path"] == "/tmp/ruff.toml"
    assert payload["select"] == ["E"]
    assert payload["severity"]["error"] == ["E", "F"]
