"""Tests for wally.scaffold.writer - writing component files."""

from __future__ import annotations

from pathlib import Path

import pytest

from wally.errors import WriteError
from wally.models.component import ComponentFile
from wally.scaffold.writer import write_files


def _component_files() -> list[ComponentFile]:
    return [
        ComponentFile(name="button.component.ts", content="export class A {}\n", description="ts"),
        ComponentFile(name="button.component.html", content="<button></button>\n", description="html"),
    ]


class TestWriteFiles:
    """Tests for write_files()."""

    def test_creates_missing_parents(self, tmp_path: Path) -> None:
        base = tmp_path / "src" / "app" / "components" / "button"
        written = write_files(base, _component_files())

        assert written == [base / "button.component.ts", base / "button.component.html"]
        assert (base / "button.component.ts").read_text() == "export class A {}\n"

    def test_idempotent(self, tmp_path: Path) -> None:
        """Writing twice succeeds and leaves identical contents."""
        base = tmp_path / "button"
        write_files(base, _component_files())
        first = {p.name: p.read_bytes() for p in base.iterdir()}
        write_files(base, _component_files())
        second = {p.name: p.read_bytes() for p in base.iterdir()}
        assert first == second

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        base = tmp_path / "button"
        base.mkdir()
        (base / "button.component.ts").write_text("old")
        write_files(base, _component_files())
        assert (base / "button.component.ts").read_text() == "export class A {}\n"

    def test_keeps_unrelated_files(self, tmp_path: Path) -> None:
        base = tmp_path / "button"
        base.mkdir()
        (base / "notes.md").write_text("mine")
        write_files(base, _component_files())
        assert (base / "notes.md").read_text() == "mine"

    def test_empty_batch_creates_directory(self, tmp_path: Path) -> None:
        assert write_files(tmp_path / "empty", []) == []
        assert (tmp_path / "empty").is_dir()

    def test_base_is_a_file(self, tmp_path: Path) -> None:
        base = tmp_path / "button"
        base.write_text("in the way")
        with pytest.raises(WriteError) as exc_info:
            write_files(base, _component_files())
        assert exc_info.value.written == []

    def test_partial_batch_is_not_rolled_back(self, tmp_path: Path) -> None:
        """A failing file leaves earlier files in place."""
        base = tmp_path / "button"
        (base / "button.component.html").mkdir(parents=True)

        with pytest.raises(WriteError) as exc_info:
            write_files(base, _component_files())

        assert exc_info.value.written == [base / "button.component.ts"]
        assert exc_info.value.path == base / "button.component.html"
        assert (base / "button.component.ts").exists()
