from __future__ import annotations

from functools import cached_property
from pathlib import Path

import pytest

from loaddir.core.config import BaseDomainConfig, ListingConfig, LoggingConfig, TemplatesConfig


class TestBaseDomainConfig:
    def test_base_config_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseDomainConfig()  # type: ignore[abstract]

    def test_concrete_config_accesses_section(self, isolated_project_env: Path) -> None:
        (isolated_project_env / ".loaddir" / "config" / "custom.yaml").write_text(
            "mySection:\n  key: value\n",
            encoding="utf-8",
        )

        class MyConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "mySection"

            @cached_property
            def key(self) -> str:
                return self.section.get("key", "default")

        assert MyConfig(repo_root=isolated_project_env).key == "value"

    def test_missing_section_is_empty(self, tmp_path: Path) -> None:
        class MissingConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "missing"

        assert MissingConfig(tmp_path, config={"listing": {}}).section == {}


def test_listing_defaults_resolve_against_repo_root(isolated_project_env: Path) -> None:
    cfg = ListingConfig(isolated_project_env)

    assert cfg.root == isolated_project_env
    assert cfg.context_variable == "folder"
    assert cfg.markdown_extensions == (".md", ".markdown")
    assert cfg.encoding == "utf-8"
    assert cfg.not_found_placeholder == "21:30"
    assert cfg.error_markup == "<h1>Error!</h1>"


def test_listing_absolute_root_is_kept(tmp_path: Path) -> None:
    content = tmp_path / "content"
    cfg = ListingConfig(tmp_path, config={"listing": {"root": str(content)}})

    assert cfg.root == content


def test_empty_failure_strings_are_respected(tmp_path: Path) -> None:
    cfg = ListingConfig(tmp_path, config={"listing": {"notFoundPlaceholder": "", "errorMarkup": ""}})

    assert cfg.not_found_placeholder == ""
    assert cfg.error_markup == ""


def test_templates_config(isolated_project_env: Path) -> None:
    cfg = TemplatesConfig(isolated_project_env)

    assert cfg.directory == isolated_project_env / "templates"
    assert cfg.autoescape is False
    assert cfg.trim_blocks is True
    assert cfg.lstrip_blocks is True


def test_logging_config(tmp_path: Path) -> None:
    cfg = LoggingConfig(tmp_path, config={"logging": {"level": "debug", "file": "logs/loaddir.log"}})

    assert cfg.level == "DEBUG"
    assert cfg.file == tmp_path / "logs" / "loaddir.log"
    assert LoggingConfig(tmp_path, config={}).file is None
