from __future__ import annotations

OK = 0
ERR_CONFIG = 2
ERR_INPUT = 3
ERR_ARTIFACT = 4
ERR_DOCS = 5
ERR_DRIFT = 6
ERR_INTERNAL = 99
