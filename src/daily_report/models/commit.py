"""Data models for retrieved commits and per-repository results."""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class CommitRecord(BaseModel):
    """A single commit that qualified for the report."""

    title: str = Field(..., description="First line of the commit message")
    hash: str = Field(..., description="Full commit SHA hash")
    short_hash: str = Field(
        ...,
        min_length=7,
        max_length=7,
        pattern=r"^[0-9a-f]{7}$",
        description="Short commit SHA hash (7 chars)",
    )
    commit_url: str = Field(..., description="Commit URL on the hosting platform")
    timestamp: datetime = Field(..., description="Commit timestamp (UTC, whole seconds)")

    @model_validator(mode="after")
    def _check_hash_links(self) -> "CommitRecord":
        if not self.hash.startswith(self.short_hash):
            raise ValueError(f"short hash {self.short_hash} is not a prefix of {self.hash}")
        if not self.commit_url.endswith(f"/commit/{self.hash}"):
            raise ValueError(f"commit URL does not point at {self.hash}")
        return self

    class Config:
        """Pydantic config."""
        frozen = True
        json_schema_extra = {
            "example": {
                "title": "Fix #141 token refresh",
                "hash": "abc1234def5678abc1234def5678abc1234def56",
                "short_hash": "abc1234",
                "commit_url": "https://github.com/acme/widgets/commit/abc1234def5678abc1234def5678abc1234def56",
                "timestamp": "2025-01-07T10:30:00Z",
            }
        }


class TimeWindow(BaseModel):
    """Closed UTC interval a commit timestamp must fall in."""

    since: datetime = Field(..., description="Window start (inclusive)")
    until: datetime = Field(..., description="Window end (inclusive)")

    @field_validator("since", "until")
    @classmethod
    def _normalize_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError("window bounds must be timezone-aware")
        return value.astimezone(timezone.utc)

    def contains(self, instant: datetime) -> bool:
        """Return True if ``since <= instant <= until``."""
        return self.since <= instant <= self.until

    class Config:
        """Pydantic config."""
        frozen = True


class RepositoryContext(BaseModel):
    """A repository path paired with its hosted base URL."""

    path: str = Field(..., description="Repository path as configured")
    base_url: str = Field(..., description="Canonical HTTPS base URL of the hosted repository")

    class Config:
        """Pydantic config."""
        frozen = True


class RepositoryReport(BaseModel):
    """Outcome of processing one configured repository."""

    path: str = Field(..., description="Repository path as configured")
    name: str = Field(..., description="Display name (last path segment)")
    base_url: Optional[str] = Field(None, description="Resolved base URL, if any")
    commits: List[CommitRecord] = Field(default_factory=list, description="Qualifying commits, newest first")
    error: Optional[str] = Field(None, description="Failure message when the repository could not be read")

    @property
    def failed(self) -> bool:
        return self.error is not None


class LanguageUsage(BaseModel):
    """Time spent in one language, as reported by a time tracker."""

    language: str = Field(..., description="Language name")
    hours: float = Field(..., ge=0, description="Hours spent")
