from __future__ import annotations

import re

GENERATED_ON_RE = re.compile(r"^\tGenerated on:\t.*$", re.M)


def strip_timestamp(text: str) -> str:
    return GENERATED_ON_RE.sub("\tGenerated on:\t", text, count=1)


def find_drift(rendered: dict[str, str], existing: dict[str, str | None]) -> list[str]:
    """Return the document names whose on-disk content differs from `rendered`.

    The generation timestamp is ignored, so an unchanged Makefile never drifts.
    """
    drift: list[str] = []
    for name, content in rendered.items():
        current = existing.get(name)
        if current is None or strip_timestamp(current) != strip_timestamp(content):
            drift.append(name)
    return drift


def find_stale(rendered: dict[str, str], on_disk: list[str]) -> list[str]:
    """Return documents left in the output directory by targets that no longer exist."""
    return [name for name in on_disk if name not in rendered]
