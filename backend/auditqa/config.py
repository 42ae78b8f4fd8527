"""AuditQA configuration: service settings and workflow defaults."""

from typing import Literal

from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # CORS (comma-separated origins)
    cors_origins: str = "http://localhost:3000"

    # Logging
    log_level: LogLevel = "INFO"

    # Closed-loop QA defaults
    recurring_issue_window_days: int = 30
    due_soon_days: int = 7
    escalation_inactivity_days: int = 5
    qa_action_due_days: int = 14  # Due date offset for actions generated at session completion

    # Competency matching
    competency_match_limit: int = 10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
