"""Tests for layered configuration loading (defaults, project YAML, env)."""
from __future__ import annotations

from pathlib import Path

import pytest

from loaddir.core.config import ConfigManager
from loaddir.core.exceptions import ConfigError


def _write_project_config(root: Path, name: str, text: str) -> None:
    (root / ".loaddir" / "config" / name).write_text(text, encoding="utf-8")


def test_bundled_defaults(isolated_project_env: Path) -> None:
    cfg = ConfigManager(isolated_project_env).load_config()

    assert cfg["listing"]["contextVariable"] == "folder"
    assert cfg["listing"]["notFoundPlaceholder"] == "21:30"
    assert cfg["listing"]["errorMarkup"] == "<h1>Error!</h1>"
    assert cfg["listing"]["markdownExtensions"] == [".md", ".markdown"]


def test_repo_root_defaults_to_env_then_cwd(isolated_project_env: Path) -> None:
    assert ConfigManager().repo_root == isolated_project_env.resolve()


def test_project_files_merge_in_alphabetical_order(isolated_project_env: Path) -> None:
    _write_project_config(isolated_project_env, "a.yaml", "listing:\n  root: first\n")
    _write_project_config(isolated_project_env, "b.yml", "listing:\n  root: second\n")

    cfg = ConfigManager(isolated_project_env).load_config()

    assert cfg["listing"]["root"] == "second"
    assert cfg["listing"]["encoding"] == "utf-8"


def test_list_append_marker(isolated_project_env: Path) -> None:
    _write_project_config(
        isolated_project_env, "listing.yaml", 'listing:\n  markdownExtensions: ["+", ".mdx"]\n'
    )

    cfg = ConfigManager(isolated_project_env).load_config()

    assert cfg["listing"]["markdownExtensions"] == [".md", ".markdown", ".mdx"]


def test_env_overrides_match_camel_case_keys(
    isolated_project_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LOADDIR_listing__notFoundPlaceholder", "missing!")
    monkeypatch.setenv("LOADDIR_templates__autoescape", "true")
    monkeypatch.setenv("LOADDIR_listing__markdownExtensions", '[".md", ".txt"]')

    cfg = ConfigManager(isolated_project_env).load_config()

    assert cfg["listing"]["notFoundPlaceholder"] == "missing!"
    assert cfg["templates"]["autoescape"] is True
    assert cfg["listing"]["markdownExtensions"] == [".md", ".txt"]
    assert "notfoundplaceholder" not in cfg["listing"]


def test_env_append_to_list(isolated_project_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOADDIR_listing__markdownExtensions__APPEND", ".mdown")

    cfg = ConfigManager(isolated_project_env).load_config()

    assert cfg["listing"]["markdownExtensions"][-1] == ".mdown"


def test_malformed_env_key_is_rejected(isolated_project_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOADDIR_listing____root", "x")

    with pytest.raises(ConfigError, match="empty segment"):
        ConfigManager(isolated_project_env).load_config()


def test_schema_violation_raises_config_error(isolated_project_env: Path) -> None:
    _write_project_config(isolated_project_env, "bad.yaml", "listing:\n  contextVariable: 'not a name'\n")

    with pytest.raises(ConfigError) as exc_info:
        ConfigManager(isolated_project_env).load_config()

    assert exc_info.value.context["path"] == "listing.contextVariable"


def test_unknown_listing_key_is_rejected(isolated_project_env: Path) -> None:
    _write_project_config(isolated_project_env, "bad.yaml", "listing:\n  recursive: true\n")

    with pytest.raises(ConfigError):
        ConfigManager(isolated_project_env).load_config()


def test_invalid_yaml_raises_config_error(isolated_project_env: Path) -> None:
    _write_project_config(isolated_project_env, "broken.yaml", "listing: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        ConfigManager(isolated_project_env).load_config()


def test_non_mapping_file_raises_config_error(isolated_project_env: Path) -> None:
    _write_project_config(isolated_project_env, "list.yaml", "- a\n- b\n")

    with pytest.raises(ConfigError, match="mapping"):
        ConfigManager(isolated_project_env).load_config()


def test_get_dot_notation(isolated_project_env: Path) -> None:
    manager = ConfigManager(isolated_project_env)

    assert manager.get("listing.encoding") == "utf-8"
    assert manager.get("listing.nope", "fallback") == "fallback"
