__version__ = "0.1.0"

__all__ = [
    "__version__",
    "check",
    "cli",
    "clock",
    "config",
    "context",
    "errors",
    "exit_codes",
    "extract",
    "fs",
    "logging",
    "model",
    "output",
    "render",
]
