from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .errors import ScriptError
from .exit_codes import ERR_CONFIG
from .output import load_schema

DEFAULT_MAKEFILE = "Makefile"
DEFAULT_OUTDIR = "./makedocs"

_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}


@dataclass(frozen=True)
class Settings:
    makefile: Path = Path(DEFAULT_MAKEFILE)
    outdir: Path = Path(DEFAULT_OUTDIR)
    split: bool = False
    merge: bool = True


def parse_bool(text: str) -> bool:
    value = text.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {text!r}")


def load_config_file(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScriptError(f"unable to read config file '{path}': {exc}", ERR_CONFIG, kind="config_invalid") from exc
    try:
        if path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ScriptError(f"unable to parse config file '{path}': {exc}", ERR_CONFIG, kind="config_invalid") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ScriptError(f"config file '{path}': root must be mapping", ERR_CONFIG, kind="config_invalid")
    try:
        jsonschema.validate(payload, load_schema("config.schema.json"))
    except jsonschema.ValidationError as exc:
        raise ScriptError(f"config file '{path}': {exc.message}", ERR_CONFIG, kind="config_invalid") from exc
    return payload


def resolve_settings(ns: argparse.Namespace, file_values: dict[str, Any] | None = None) -> Settings:
    """Merge CLI flags over config file values over defaults."""
    values = dict(file_values or {})
    for key in ("makefile", "outdir", "split", "merge"):
        cli_value = getattr(ns, key, None)
        if cli_value is not None:
            values[key] = cli_value
    defaults = Settings()
    return Settings(
        makefile=Path(values.get("makefile", defaults.makefile)),
        outdir=Path(values.get("outdir", defaults.outdir)),
        split=bool(values.get("split", defaults.split)),
        merge=bool(values.get("merge", defaults.merge)),
    )


def require_output_mode(settings: Settings) -> None:
    if not settings.split and not settings.merge:
        raise ScriptError(
            "You must enable either split or merge, otherwise there will be no output!",
            ERR_CONFIG,
            kind="split_or_merge_required",
        )
