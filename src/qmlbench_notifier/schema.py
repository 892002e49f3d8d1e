"""Packaged JSON schemas for qmlbench result files."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

REPORT_SCHEMA = "qmlbench.report.v1"
ENTRY_SCHEMA = "qmlbench.entry.v1"


def schemas_root() -> Path:
    return Path(str(resources.files(__package__) / "schemas"))


def schema_path_for(schema_name: str) -> Path:
    return schemas_root() / f"{schema_name}.schema.json"


@lru_cache(maxsize=None)
def _validator(schema_name: str) -> jsonschema.protocols.Validator:
    schema = json.loads(schema_path_for(schema_name).read_text(encoding="utf-8"))
    cls = jsonschema.validators.validator_for(schema)
    cls.check_schema(schema)
    return cls(schema)


def first_error(schema_name: str, payload: Any) -> str | None:
    """Return a one-line description of the most relevant violation, or None."""
    error = jsonschema.exceptions.best_match(_validator(schema_name).iter_errors(payload))
    if error is None:
        return None
    pointer = "/".join(str(p) for p in error.absolute_path)
    loc = pointer or "<root>"
    return f"{schema_name} at {loc}: {error.message}"
