from __future__ import annotations

from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


class Settings(BaseModel):
    audit_log_path: str = os.getenv("MOCK_HTTP_AUDIT_LOG_PATH", "")
    metrics_enabled: bool = os.getenv("MOCK_HTTP_METRICS_ENABLED", "true").lower() == "true"
    thread_safe: bool = os.getenv("MOCK_HTTP_THREAD_SAFE", "false").lower() == "true"
    scenario_path: str = os.getenv("MOCK_HTTP_SCENARIO_PATH", "")


settings = Settings()
