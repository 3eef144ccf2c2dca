from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
import yaml
from pydantic import BaseModel, Field

from dispatcher.dispatcher import ResponseConfigMap
from dispatcher.errors import ConfigError
from dispatcher.sequence import ResponseSequence
from scenario.schema import validate_scenario_payload


class ResponseSpec(BaseModel):
    status_code: int = 200
    headers: Dict[str, str] = Field(default_factory=dict)
    text: Optional[str] = None
    json_body: Any = Field(default=None, alias="json")

    def to_response(self) -> httpx.Response:
        if "json_body" in self.model_fields_set:
            # explicit `json: null` is a body of "null", not an empty response
            headers = httpx.Headers(self.headers)
            headers.setdefault("content-type", "application/json")
            content = json.dumps(self.json_body, ensure_ascii=False).encode("utf-8")
            return httpx.Response(self.status_code, headers=headers, content=content)
        return httpx.Response(self.status_code, headers=self.headers, text=self.text or "")


def load_document(path: str | Path) -> Any:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError("SCENARIO_UNREADABLE", f"cannot read scenario {p}: {exc}") from exc

    try:
        if p.suffix.lower() == ".json":
            return json.loads(raw)
        return yaml.safe_load(raw)
    except (ValueError, yaml.YAMLError) as exc:
        raise ConfigError("SCENARIO_UNREADABLE", f"cannot parse scenario {p}: {exc}") from exc


def build_config(doc: Any) -> ResponseConfigMap:
    """
    Turn a scenario document into response sequences.

    Only the document shape is checked here. Empty response lists and negative
    budgets pass through so that dispatcher construction reports them with the
    same codes as hand-built configurations.
    """
    if doc is None:
        raise ConfigError("CONFIG_ABSENT", "scenario document is empty")
    validate_scenario_payload(doc)

    config: ResponseConfigMap = {}
    for method, entry in doc["methods"].items():
        responses = [
            None if item is None else ResponseSpec.model_validate(item).to_response()
            for item in entry["responses"]
        ]
        config[method] = ResponseSequence(responses=responses, max_calls=int(entry.get("max_calls", 0)))
    return config


def load_config(path: str | Path) -> ResponseConfigMap:
    if not str(path):
        raise ConfigError("CONFIG_ABSENT", "no scenario path configured")
    return build_config(load_document(path))
