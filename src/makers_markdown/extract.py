"""Comment block extraction for make target declarations.

The scanner runs a single forward pass over the input lines. While seeking it
looks for a `name: prerequisites` declaration; once one is found every
directly following `#` line is appended to that target's documentation. The
first line that is not a comment closes the block. That line is not itself
re-scanned as a declaration, so a declaration placed directly after a comment
block is only picked up if a blank line separates them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .model import Target

TARGET_RE = re.compile(r"^(?P<tgt>[A-Za-z0-9_-]+):(?P<prereqs>.*)")
COMMENT_RE = re.compile(r"^\s*#(?P<markdown>.*)$")


@dataclass(frozen=True)
class Seeking:
    pass


@dataclass(frozen=True)
class Accumulating:
    pending: Target


ScannerState = Seeking | Accumulating


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def parse_prerequisites(raw: str) -> list[str]:
    # Counts raw tokens, so `clean:build` has no prerequisites while `clean: build`
    # (leading empty token) keeps `build`.
    tokens = raw.split(" ")
    if len(tokens) <= 1:
        return []
    return [tok for tok in tokens if tok]


def _declaration(line: str) -> Target | None:
    m = TARGET_RE.match(line)
    if not m:
        return None
    return Target(name=m.group("tgt"), prerequisites=parse_prerequisites(m.group("prereqs")))


def _comment(line: str) -> str | None:
    m = COMMENT_RE.match(line)
    return m.group("markdown") if m else None


def _finalize(target: Target, targets: list[Target]) -> None:
    if target.is_documented():
        targets.append(target)


def step(state: ScannerState, line: str, targets: list[Target]) -> ScannerState:
    if isinstance(state, Accumulating):
        text = _comment(line)
        if text is not None:
            state.pending.add_line(text)
            return state
        _finalize(state.pending, targets)
        return Seeking()
    target = _declaration(line)
    if target is None:
        return state
    return Accumulating(target)


def extract(lines: Iterable[str]) -> list[Target]:
    targets: list[Target] = []
    state: ScannerState = Seeking()
    for line in lines:
        state = step(state, line, targets)
    if isinstance(state, Accumulating):
        _finalize(state.pending, targets)
    return targets
