"""Pydantic schemas for YAML task files."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import (
    MAX_DURATION_MINUTES,
    MAX_PRIORITY,
    MIN_DURATION_MINUTES,
    MIN_PRIORITY,
    is_timezone_aware,
)


class TaskSchema(BaseModel):
    """Schema for a single task entry."""

    title: str = ""
    description: str | None = None
    duration: int = Field(ge=MIN_DURATION_MINUTES, le=MAX_DURATION_MINUTES)
    priority: int = Field(default=3, ge=MIN_PRIORITY, le=MAX_PRIORITY)
    deadline: datetime | None = None
    requires: list[str] = Field(default_factory=list)

    @field_validator("requires", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Ensure value is a list."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]


class TaskFileSchema(BaseModel):
    """Schema for the entire task file."""

    name: str | None = None
    start_time: datetime | None = None
    tasks: dict[str, TaskSchema] = Field(default_factory=dict)

    @field_validator("tasks", mode="before")
    @classmethod
    def ensure_dict(cls, v: Any) -> Any:
        """Treat an empty ``tasks:`` key as no tasks and stringify task IDs."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(key): value for key, value in v.items()}  # type: ignore[misc]
        return v

    @model_validator(mode="after")
    def check_timezones(self) -> TaskFileSchema:
        """Reject files mixing timezone-aware and naive timestamps."""
        timestamps = [task.deadline for task in self.tasks.values() if task.deadline is not None]
        if self.start_time is not None:
            timestamps.append(self.start_time)
        if len({is_timezone_aware(value) for value in timestamps}) > 1:
            raise ValueError(
                "start_time and deadlines must either all have a timezone offset "
                "or all omit it"
            )
        return self
