from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft202012Validator

from dispatcher.errors import ConfigError


_SCHEMA_PATH = Path(__file__).resolve().parent / "scenario_schema.json"


def load_scenario_schema() -> Dict[str, Any]:
    return json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_scenario_payload(payload: Any) -> None:
    validator = Draft202012Validator(load_scenario_schema())
    errors = sorted(validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        joined = "; ".join(e.message for e in errors)
        raise ConfigError("SCENARIO_SCHEMA_INVALID", f"scenario schema validation failed: {joined}")
