from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from dispatcher.errors import ConfigError
import mock_runtime.config as config_module
from mock_runtime.config import Settings
from mock_runtime.metrics import metrics
from transports.client import MockHttpClient


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MOCK_HTTP_AUDIT_LOG_PATH", str(tmp_path / "audit.jsonl"))
    monkeypatch.setenv("MOCK_HTTP_METRICS_ENABLED", "FALSE")
    monkeypatch.setenv("MOCK_HTTP_THREAD_SAFE", "true")
    monkeypatch.setenv("MOCK_HTTP_SCENARIO_PATH", "scenarios/retry.yaml")
    try:
        reloaded = importlib.reload(config_module)
        s = reloaded.Settings()
        assert s.audit_log_path == str(tmp_path / "audit.jsonl")
        assert s.metrics_enabled is False
        assert s.thread_safe is True
        assert s.scenario_path == "scenarios/retry.yaml"
        assert reloaded.settings.thread_safe is True
    finally:
        monkeypatch.undo()
        importlib.reload(config_module)


def test_settings_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MOCK_HTTP_AUDIT_LOG_PATH", "MOCK_HTTP_METRICS_ENABLED", "MOCK_HTTP_THREAD_SAFE", "MOCK_HTTP_SCENARIO_PATH"):
        monkeypatch.delenv(name, raising=False)
    try:
        s = importlib.reload(config_module).Settings()
        assert s.audit_log_path == ""
        assert s.metrics_enabled is True
        assert s.thread_safe is False
        assert s.scenario_path == ""
    finally:
        monkeypatch.undo()
        importlib.reload(config_module)


def test_client_from_settings(tmp_path: Path) -> None:
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text("methods:\n  GET:\n    responses:\n      - status_code: 204\n", encoding="utf-8")
    audit_path = tmp_path / "audit.jsonl"

    client = MockHttpClient.from_settings(
        Settings(
            audit_log_path=str(audit_path),
            metrics_enabled=False,
            thread_safe=True,
            scenario_path=str(scenario),
        )
    )
    assert client.metrics is None
    assert client.dispatcher.sequence("GET").thread_safe is True
    assert client.get("http://1.2.3.4").status_code == 204
    assert audit_path.exists()


def test_client_from_settings_uses_shared_metrics(tmp_path: Path) -> None:
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text("methods:\n  GET:\n    responses: [null]\n", encoding="utf-8")
    client = MockHttpClient.from_settings(Settings(scenario_path=str(scenario), metrics_enabled=True))
    assert client.metrics is metrics


def test_client_from_settings_requires_scenario() -> None:
    with pytest.raises(ConfigError) as exc:
        MockHttpClient.from_settings(Settings(scenario_path=""))
    assert exc.value.code == "CONFIG_ABSENT"
