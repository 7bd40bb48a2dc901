"""Pydantic configuration models for moodtrack."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class PathsConfig(BaseModel):
    """File paths configuration."""

    db_path: Path = Path("~/.moodtrack/mood.db")
    log_file: Path = Path("~/.moodtrack/moodtrack.log")
    export_dir: Path = Path("~/.moodtrack/exports")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.db_path = self.db_path.expanduser()
        self.log_file = self.log_file.expanduser()
        self.export_dir = self.export_dir.expanduser()
        return self


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file_level: str = "DEBUG"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class AnalyticsConfig(BaseModel):
    """Defaults for trend/tag views."""

    trend_days: int = Field(default=30, ge=1, le=366)
    top_tags: int = Field(default=8, ge=1)
    recent_limit: int = Field(default=5, ge=1)


VALID_SUGGESTERS = {"random"}


class SuggesterConfig(BaseModel):
    """Mood suggestion backend."""

    provider: str = "random"
    delay_seconds: float = Field(default=0.0, ge=0.0)

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        if v not in VALID_SUGGESTERS:
            raise ValueError(f"Invalid suggester: {v}. Must be one of {VALID_SUGGESTERS}")
        return v


class WebConfig(BaseModel):
    """Web API settings."""

    jwt_secret: Optional[str] = None
    frontend_origin: str = "http://localhost:3000"


class MoodConfig(BaseModel):
    """Main configuration model."""

    user_id: str = "local"  # owner id for entries logged from the CLI
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    suggester: SuggesterConfig = Field(default_factory=SuggesterConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    @model_validator(mode="after")
    def expand_env_vars(self):
        """Expand ${VAR} pattern in the JWT secret."""
        secret = self.web.jwt_secret
        if secret and secret.startswith("${") and secret.endswith("}"):
            self.web.jwt_secret = os.getenv(secret[2:-1], "")
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "MoodConfig":
        """Create config from a parsed YAML dict."""
        if "paths" in data and isinstance(data["paths"], dict):
            for key in ["db_path", "log_file", "export_dir"]:
                if isinstance(data["paths"].get(key), str):
                    data["paths"][key] = Path(data["paths"][key])
        return cls.model_validate(data)
