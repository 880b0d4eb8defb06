from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .check import find_drift, find_stale
from .config import load_config_file, parse_bool, require_output_mode, resolve_settings
from .context import RunContext
from .errors import ScriptError
from .exit_codes import ERR_DRIFT, ERR_INTERNAL, OK
from .extract import extract
from .fs import ensure_outdir, list_documents, read_existing, read_lines, write_documents
from .logging import log_event
from .model import Makefile
from .output import build_result_payload, dumps_json, render_error
from .render import RenderOptions, render


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="makers-markdown",
        description="Generate markdown documentation from comments in a Makefile",
    )
    p.add_argument("--version", action="version", version=f"makers-markdown {__version__}")
    p.add_argument("--makefile", default=None, help="the target makefile to process (default: Makefile)")
    p.add_argument("--outdir", default=None, help="the directory in which to write output (default: ./makedocs)")
    p.add_argument(
        "--split",
        type=parse_bool,
        nargs="?",
        const=True,
        default=None,
        metavar="BOOL",
        help="split each target into a separate file (default: false)",
    )
    p.add_argument(
        "--merge",
        type=parse_bool,
        nargs="?",
        const=True,
        default=None,
        metavar="BOOL",
        help="merge all targets into one README.md (default: true)",
    )
    p.add_argument("--config", help="YAML or JSON file with makefile/outdir/split/merge defaults")
    p.add_argument("--check", action="store_true", help="fail if generated outputs differ; write nothing")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--run-id", help="run identifier for diagnostics")
    p.add_argument("--log-json", action="store_true", help="emit diagnostics as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    return p


def run(ctx: RunContext, ns: argparse.Namespace) -> int:
    file_values = load_config_file(Path(ns.config)) if ns.config else None
    settings = resolve_settings(ns, file_values)
    require_output_mode(settings)
    log_event(
        ctx,
        "info",
        "cli",
        "start",
        makefile=str(settings.makefile),
        outdir=str(settings.outdir),
        split=settings.split,
        merge=settings.merge,
        check=ns.check,
    )

    lines = read_lines(settings.makefile)
    if not ns.check:
        ensure_outdir(settings.outdir)
    if ctx.output_format == "text" and not ctx.quiet:
        print(f"Processing {settings.makefile} and outputting to {settings.outdir}")

    makefile = Makefile(str(settings.makefile), extract(lines))
    log_event(ctx, "info", "extract", "done", targets=len(makefile.targets))
    documents = render(
        makefile.source,
        makefile.targets,
        RenderOptions(emit_merged=settings.merge, emit_split=settings.split),
    )

    names = [tgt.name for tgt in makefile.targets]
    if ns.check:
        drift = find_drift(documents, read_existing(settings.outdir, list(documents)))
        if settings.split:
            drift += find_stale(documents, list_documents(settings.outdir))
        for name in drift:
            log_event(ctx, "warn", "check", "drift", document=name)
        status = "drift" if drift else "ok"
        if ctx.output_format == "json":
            payload = build_result_payload(
                run_id=ctx.run_id,
                makefile=str(settings.makefile),
                outdir=str(settings.outdir),
                targets=names,
                documents=list(documents),
                status=status,
                drift=drift,
            )
            print(dumps_json(payload))
        elif drift:
            print(f"generated documents out of date in {settings.outdir}:", file=sys.stderr)
            for name in drift:
                print(f"- {name}", file=sys.stderr)
        return ERR_DRIFT if drift else OK

    written = write_documents(settings.outdir, documents)
    for path in written:
        log_event(ctx, "info", "write", "document", path=str(path))
    if ctx.output_format == "json":
        payload = build_result_payload(
            run_id=ctx.run_id,
            makefile=str(settings.makefile),
            outdir=str(settings.outdir),
            targets=names,
            documents=[path.name for path in written],
        )
        print(dumps_json(payload))
    return OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    ctx = RunContext.from_args(
        ns.run_id,
        verbose=ns.verbose,
        quiet=ns.quiet,
        log_json=ns.log_json,
        output_format="json" if ns.json else "text",
    )
    try:
        rc = run(ctx, ns)
        log_event(ctx, "info", "cli", "finish", rc=rc)
        return rc
    except ScriptError as exc:
        print(
            render_error(
                as_json=(ctx.output_format == "json"),
                message=str(exc),
                code=exc.code,
                kind=exc.kind,
                run_id=ctx.run_id,
            ),
            file=sys.stderr,
        )
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(
                as_json=(ctx.output_format == "json"),
                message=f"internal error: {exc}",
                code=ERR_INTERNAL,
                kind="internal_error",
                run_id=ctx.run_id,
            ),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
