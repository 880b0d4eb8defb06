from __future__ import annotations

from pathlib import Path

import pytest
from makers_markdown.errors import ScriptError
from makers_markdown.exit_codes import ERR_ARTIFACT, ERR_INPUT
from makers_markdown.fs import ensure_outdir, list_documents, read_existing, read_lines, write_documents


def test_read_lines_splits_on_newline(tmp_path: Path) -> None:
    mk = tmp_path / "Makefile"
    mk.write_text("a:\n# doc\n", encoding="utf-8")
    assert read_lines(mk) == ["a:", "# doc", ""]


def test_read_lines_missing(tmp_path: Path) -> None:
    with pytest.raises(ScriptError) as exc:
        read_lines(tmp_path / "Makefile")
    assert exc.value.code == ERR_INPUT
    assert exc.value.kind == "input_missing"


def test_read_lines_unreadable(tmp_path: Path) -> None:
    with pytest.raises(ScriptError) as exc:
        read_lines(tmp_path)
    assert exc.value.kind == "input_unreadable"


def test_read_lines_rejects_invalid_utf8(tmp_path: Path) -> None:
    mk = tmp_path / "Makefile"
    mk.write_bytes(b"a:\n# \xff\n")
    with pytest.raises(ScriptError) as exc:
        read_lines(mk)
    assert exc.value.kind == "input_unreadable"


def test_ensure_outdir_creates_parents(tmp_path: Path) -> None:
    out = ensure_outdir(tmp_path / "a" / "b")
    assert out.is_dir()
    assert ensure_outdir(out) == out


def test_write_documents_in_order(tmp_path: Path) -> None:
    written = write_documents(tmp_path, {"README.md": "r\n", "b.md": "b\n"})
    assert [p.name for p in written] == ["README.md", "b.md"]
    assert (tmp_path / "b.md").read_bytes() == b"b\n"


def test_write_failure_aborts_and_keeps_earlier_files(tmp_path: Path) -> None:
    (tmp_path / "blocked.md").mkdir()
    with pytest.raises(ScriptError) as exc:
        write_documents(tmp_path, {"first.md": "1\n", "blocked.md": "2\n", "last.md": "3\n"})
    assert exc.value.code == ERR_ARTIFACT
    assert exc.value.kind == "write_failed"
    assert (tmp_path / "first.md").is_file()
    assert not (tmp_path / "last.md").exists()


def test_read_existing(tmp_path: Path) -> None:
    (tmp_path / "a.md").write_text("x", encoding="utf-8")
    assert read_existing(tmp_path, ["a.md", "b.md"]) == {"a.md": "x", "b.md": None}


def test_read_existing_rejects_undecodable_document(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_bytes(b"\xff\xfe garbage")
    with pytest.raises(ScriptError) as exc:
        read_existing(tmp_path, ["README.md"])
    assert exc.value.code == ERR_ARTIFACT
    assert exc.value.kind == "read_failed"


def test_list_documents(tmp_path: Path) -> None:
    assert list_documents(tmp_path / "missing") == []
    (tmp_path / "b.md").write_text("b", encoding="utf-8")
    (tmp_path / "a.md").write_text("a", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("n", encoding="utf-8")
    (tmp_path / "dir.md").mkdir()
    assert list_documents(tmp_path) == ["a.md", "b.md"]
