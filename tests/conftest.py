"""Shared test fixtures for dirdigest."""

from __future__ import annotations

from pathlib import Path

import pytest

from dirdigest.config.models import DirDigestConfig


def write_tree(root: Path, files: dict[str, bytes | str]) -> Path:
    """Create *files* (relative path -> content) under *root*."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            target.write_text(content)
        else:
            target.write_bytes(content)
    return root


@pytest.fixture
def make_tree(tmp_path):
    """Factory: make_tree("name", {"a.txt": "x"}) -> Path."""

    def _make(name: str, files: dict[str, bytes | str]) -> Path:
        return write_tree(tmp_path / name, files)

    return _make


@pytest.fixture
def scenario_dirs(make_tree):
    """Directory A has x.txt + y.txt, directory B has x.txt + z.txt."""
    a = make_tree("A", {"x.txt": "hello", "y.txt": "world"})
    b = make_tree("B", {"x.txt": "hello", "z.txt": "world"})
    return a, b


@pytest.fixture
def nested_project(make_tree):
    return make_tree(
        "project",
        {
            "README.md": "# Readme",
            "src/main.py": "print('hi')",
            "src/util/helpers.py": "def helper(): pass",
            "data/blob.bin": bytes(range(256)) * 64,
        },
    )


@pytest.fixture
def sample_config():
    return DirDigestConfig()
