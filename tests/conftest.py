"""Shared fixtures and helpers for tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from chunkhunter.pipeline import HuntConfig


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A working directory laid out like a real run: input/, chunks.txt."""
    (tmp_path / "input").mkdir()
    (tmp_path / "chunks.txt").write_text(
        "good morning\n  Was Always \nby the way\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def config(workspace: Path) -> HuntConfig:
    return HuntConfig(
        input_dir=workspace / "input",
        chunks_file=workspace / "chunks.txt",
        output_dir=workspace / "output",
    )


@pytest.fixture
def write_doc():
    """Write a UTF-8 document, creating parent folders."""

    def _write(root: Path, name: str, text: str) -> Path:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
