"""Configuration models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from daily_report.validation import validate_author_email


class ReportConfig(BaseModel):
    """Resolved options for a single report run."""

    repo_paths: List[str] = Field(
        default_factory=lambda: ["."],
        min_length=1,
        description="Repository paths, reported in this order",
    )
    author_email: Optional[str] = Field(None, description="Only include commits by this author or co-author")
    since: Optional[datetime] = Field(None, description="Window start; defaults to yesterday 17:00 local time")
    until: Optional[datetime] = Field(None, description="Window end; defaults to now")

    @field_validator("author_email")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return validate_author_email(value)

    @field_validator("since", "until")
    @classmethod
    def _check_aware(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            raise ValueError("timestamps must carry a UTC offset")
        return value

    class Config:
        """Pydantic config."""
        json_schema_extra = {
            "example": {
                "repo_paths": ["/path/to/widgets", "/path/to/gadgets"],
                "author_email": "dev@example.com",
                "since": "2025-01-06T08:00:00Z",
                "until": "2025-01-07T08:00:00Z",
            }
        }


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are prefixed with DAILY_REPORT_ (e.g., DAILY_REPORT_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="DAILY_REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Hosts whose remotes can be turned into web links
    forge_hosts: List[str] = Field(default_factory=lambda: ["github.com"])

    # Local hour the default window starts at, on the previous day
    cutoff_hour: int = Field(17, ge=0, le=23)

    # Repositories walked concurrently
    max_workers: int = Field(1, ge=1)

    report_title: str = "What I did"
