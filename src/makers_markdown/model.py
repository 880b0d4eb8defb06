from __future__ import annotations

from dataclasses import dataclass, field

DOC_EXTENSION = "md"


@dataclass
class Target:
    """One documented make target.

    `name` is taken verbatim from the declaration line and is used unsanitized
    in file names and HTML anchors.
    """

    name: str
    prerequisites: list[str] = field(default_factory=list)
    documentation: str = ""

    @property
    def filename(self) -> str:
        return f"{self.name}.{DOC_EXTENSION}"

    def add_line(self, text: str) -> None:
        self.documentation += f"{text}\n"

    def is_documented(self) -> bool:
        return self.documentation != ""


@dataclass(frozen=True)
class Makefile:
    source: str
    targets: list[Target]
