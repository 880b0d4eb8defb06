from __future__ import annotations

from pathlib import Path

from .errors import ScriptError
from .exit_codes import ERR_ARTIFACT, ERR_INPUT
from .extract import split_lines


def read_lines(path: Path) -> list[str]:
    if not path.exists():
        raise ScriptError(f"Input file does not exist: '{path}'", ERR_INPUT, kind="input_missing")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptError(f"Input file is unreadable: '{path}': {exc}", ERR_INPUT, kind="input_unreadable") from exc
    return split_lines(text)


def ensure_outdir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScriptError(f"Unable to create output directory '{path}': {exc}", ERR_ARTIFACT, kind="outdir_failed") from exc
    return path


def write_document(path: Path, content: str) -> Path:
    try:
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
    except OSError as exc:
        raise ScriptError(f"Unable to write '{path}': {exc}", ERR_ARTIFACT, kind="write_failed") from exc
    return path


def write_documents(outdir: Path, documents: dict[str, str]) -> list[Path]:
    # Stops at the first failure; documents already written stay on disk.
    return [write_document(outdir / name, content) for name, content in documents.items()]


def read_existing(outdir: Path, names: list[str]) -> dict[str, str | None]:
    existing: dict[str, str | None] = {}
    for name in names:
        path = outdir / name
        if not path.is_file():
            existing[name] = None
            continue
        try:
            existing[name] = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ScriptError(f"Unable to read '{path}': {exc}", ERR_ARTIFACT, kind="read_failed") from exc
    return existing


def list_documents(outdir: Path) -> list[str]:
    if not outdir.is_dir():
        return []
    return sorted(p.name for p in outdir.glob("*.md") if p.is_file())
