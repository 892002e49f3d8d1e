__version__ = "0.1.0"

__all__ = [
    "__version__",
    "accumulate",
    "cli",
    "compare",
    "config",
    "dispatch",
    "errors",
    "exit_codes",
    "formatting",
    "logging",
    "model",
    "process",
    "reader",
    "scan",
    "schema",
]
