"""JSON payload helpers for command results and errors."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

TOOL = "makers-markdown"
SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def dumps_json(payload: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(payload, indent=2, sort_keys=True)
    return json.dumps(payload, sort_keys=True)


def load_schema(name: str) -> dict[str, Any]:
    return json.loads((SCHEMAS_DIR / name).read_text(encoding="utf-8"))


def build_result_payload(
    *,
    run_id: str,
    makefile: str,
    outdir: str,
    targets: list[str],
    documents: list[str],
    status: str = "ok",
    drift: list[str] | None = None,
) -> dict[str, object]:
    payload: dict[str, object] = {
        "schema_version": 1,
        "tool": TOOL,
        "status": status,
        "run_id": run_id,
        "makefile": makefile,
        "outdir": outdir,
        "targets": targets,
        "documents": documents,
    }
    if drift is not None:
        payload["drift"] = drift
    jsonschema.validate(payload, load_schema("result.schema.json"))
    return payload


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error", run_id: str = "") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_version": 1,
                "tool": TOOL,
                "status": "error",
                "run_id": run_id,
                "errors": [{"code": code, "kind": kind, "message": message}],
            }
        )
    return message
