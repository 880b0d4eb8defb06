"""Markdown rendering for extracted targets.

Output is markdown with embedded HTML anchors, since plain markdown link syntax
does not give reliable in-page fragment targets.
"""

from __future__ import annotations

from dataclasses import dataclass

from .clock import utc_now_iso
from .errors import ScriptError
from .exit_codes import ERR_DOCS
from .model import DOC_EXTENSION, Target

MERGED_DOCUMENT = "README.md"


@dataclass(frozen=True)
class RenderOptions:
    emit_merged: bool = True
    emit_split: bool = False


def render_header(source_label: str, generated_at: str) -> str:
    header = "<!--\n"
    header += f"\tGenerated on:\t{generated_at}\n"
    header += f"\tFrom:\t{source_label}\n"
    header += "\n\tDO NOT MANUALLY EDIT THIS FILE.\n\tYOUR CHANGES WILL BE LOST NEXT TIME IT'S GENERATED\n"
    header += "-->\n\n"
    return header


def _fragment_link(name: str) -> str:
    return f"#{name}"


def _file_link(name: str) -> str:
    return f"{name}.{DOC_EXTENSION}"


def _link(name: str, merged: bool) -> str:
    href = _fragment_link(name) if merged else _file_link(name)
    return f'<a href="{href}">`{name}`</a>'


def render_toc(targets: list[Target], merged: bool) -> str:
    lines = ["", "# Targets"]
    lines.extend(f"1. {_link(tgt.name, merged)}" for tgt in targets)
    return "\n".join(lines) + "\n\n\n___\n\n\n"


def render_section(target: Target, merged: bool) -> str:
    out = f'### <a name="{target.name}">`{target.name}`</a>\n'
    if target.prerequisites:
        out += "Pre-Requisites: "
        for req in target.prerequisites:
            out += f"{_link(req, merged)}\n"
    out += target.documentation
    out += "\n---\n"
    return out


def render(
    source_label: str,
    targets: list[Target],
    options: RenderOptions,
    generated_at: str | None = None,
) -> dict[str, str]:
    """Render targets into documents keyed by file name.

    With `emit_merged` the `README.md` document holds a fragment-linked table of
    contents and every section. With only `emit_split`, `README.md` is an index
    of file links and each target gets its own `<name>.md`. Raises
    `ScriptError` when there is nothing to document.
    """
    if not targets:
        raise ScriptError(
            f"Makefile ({source_label}) contains no documented targets",
            ERR_DOCS,
            kind="no_documented_targets",
        )
    header = render_header(source_label, generated_at or utc_now_iso())
    documents: dict[str, str] = {}

    index = header + render_toc(targets, merged=options.emit_merged)
    if options.emit_merged:
        index += "".join(render_section(tgt, merged=True) for tgt in targets)
    documents[MERGED_DOCUMENT] = index

    if options.emit_split:
        for tgt in targets:
            documents[tgt.filename] = header + render_section(tgt, merged=False)
    return documents
