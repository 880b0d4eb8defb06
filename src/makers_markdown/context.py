from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

OutputFormat = Literal["text", "json"]


def make_run_id(prefix: str = "makedocs") -> str:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{ts}"


@dataclass(frozen=True)
class RunContext:
    run_id: str
    verbose: bool
    quiet: bool
    log_json: bool
    output_format: OutputFormat

    @property
    def emit_diagnostics(self) -> bool:
        return self.verbose and not self.quiet

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
        output_format: OutputFormat = "text",
    ) -> RunContext:
        resolved = run_id or os.environ.get("RUN_ID") or make_run_id()
        return cls(
            run_id=resolved,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
            output_format=output_format,
        )
