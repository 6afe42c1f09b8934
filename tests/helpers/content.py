"""Builders for listing-root fixtures."""
from __future__ import annotations

from pathlib import Path
from typing import Dict


POSTS: Dict[str, str] = {
    "hello.md": '---\ntitle: "Hello"\ndate: 2024-01-02\ntags: [intro]\n---\n\n# Hello\n',
    "bare.md": "title: Bare\nauthor: someone\n",
    "plain.md": "---\n---\nJust text.\n",
    "image.png": "not really a png",
}

NOTES: Dict[str, str] = {
    "todo.markdown": "---\ntitle: Todo\n---\n- one\n",
    "readme.txt": "title: ignored because not markdown\n",
}


def write_files(folder: Path, files: Dict[str, str]) -> Path:
    folder.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (folder / name).write_text(content, encoding="utf-8")
    return folder


def build_content_tree(root: Path) -> Path:
    write_files(root / "posts", POSTS)
    (root / "posts" / "drafts").mkdir()
    write_files(root / "notes", NOTES)
    return root


def entries_by_path(entries):
    return {entry["path"]: entry for entry in entries}
