from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

_ALLOWED_MARKERS = {"unit", "integration"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / "artifacts/makers-markdown/.hypothesis/examples"
_HYPOTHESIS_DB.parent.mkdir(parents=True, exist_ok=True)
settings.register_profile("makers-markdown", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB))
settings.load_profile("makers-markdown")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture
def sample_makefile(tmp_path: Path) -> Path:
    mk = tmp_path / "Makefile"
    mk.write_text(
        "\n".join(
            [
                "build:",
                "# Builds the project",
                "# from sources.",
                "",
                "clean: build",
                "# Removes artifacts",
                "",
                "release: build test",
                "\t# Publishes a release",
                "",
                "undocumented:",
                "\t@echo nothing",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return mk
