from __future__ import annotations

import dataclasses

import pytest

from loaddir.core.listing.models import FileInfo, FolderResultSet


def test_to_dict_omits_absent_optional_keys() -> None:
    assert FileInfo(path="posts/a.png", is_markdown=False).to_dict() == {
        "path": "posts/a.png",
        "isMarkdown": False,
    }


def test_to_dict_includes_title_and_frontmatter() -> None:
    info = FileInfo(path="posts/a.md", is_markdown=True, title="A", frontmatter={"title": "A"})

    assert info.to_dict() == {
        "path": "posts/a.md",
        "isMarkdown": True,
        "title": "A",
        "frontmatter": {"title": "A"},
    }


def test_file_info_is_immutable() -> None:
    info = FileInfo(path="posts/a.md", is_markdown=True)
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.path = "other"  # type: ignore[misc]


def test_folder_result_set_is_a_dict() -> None:
    folders = FolderResultSet(a=[])
    folders["b"] = []
    assert dict(folders) == {"a": [], "b": []}
