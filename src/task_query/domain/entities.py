"""
Core Domain Entities.

This module defines the task record that every query operates on.
Tasks are immutable once built; tags can only be added through
TaskBuilder before the task exists.
"""

from __future__ import annotations

import uuid
from datetime import date
from enum import Enum
from typing import Any, FrozenSet, Optional, Set

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from task_query.errors import InvalidArgument


class TaskType(str, Enum):
    """Category of a task."""

    READING = "READING"
    CODING = "CODING"
    BLOGGING = "BLOGGING"


class User(BaseModel):
    """Person a task can be assigned to."""

    username: str = Field(..., min_length=1, description="Login name")
    address: Optional[str] = Field(default=None, description="Postal address")

    model_config = {"frozen": True}


class Task(BaseModel):
    """A unit of work with semantic (title + type) equality."""

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Opaque identifier, stable for the task's lifetime",
    )
    title: str = Field(..., description="Short task title")
    description: Optional[str] = Field(
        default=None, description="Longer description, defaults to title"
    )
    type: TaskType = Field(..., description="Task category")
    created_on: date = Field(
        default_factory=date.today, description="Date the task was created"
    )
    tags: FrozenSet[str] = Field(default_factory=frozenset, description="Tag set")
    assigned_to: Optional[User] = Field(default=None, description="Assignee, if any")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _default_description(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("description") is None:
            data = dict(data)
            data["description"] = data.get("title")
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _numeric_id_as_text(cls, value: Any) -> Any:
        # YAML reads `id: 1` as an int
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def __hash__(self) -> int:
        return hash((self.title, self.type))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.title == other.title and self.type == other.type

    def __str__(self) -> str:
        return f"Task(title='{self.title}', type={self.type.value})"

    def has_tag(self, tag: str) -> bool:
        """Check whether the task carries a tag."""
        return tag in self.tags


class TaskBuilder:
    """
    Collects task fields, including tags, before the task is frozen.

    Example:
        >>> task = (
        ...     TaskBuilder("Read Effective Java", TaskType.READING)
        ...     .add_tag("java")
        ...     .add_tag("books")
        ...     .build()
        ... )
    """

    def __init__(
        self,
        title: str,
        type: TaskType,
        *,
        description: Optional[str] = None,
        created_on: Optional[date] = None,
        id: Optional[str] = None,
        assigned_to: Optional[User] = None,
    ) -> None:
        self._title = title
        self._type = type
        self._description = description
        self._created_on = created_on
        self._id = id
        self._assigned_to = assigned_to
        self._tags: Set[str] = set()

    def add_tag(self, tag: str) -> "TaskBuilder":
        """Add a tag and return this builder."""
        self._tags.add(tag)
        return self

    def build(self) -> Task:
        """
        Freeze the collected fields into a Task.

        Raises:
            InvalidArgument: If a field fails validation (e.g. unknown type)
        """
        fields: dict = {
            "title": self._title,
            "type": self._type,
            "description": self._description,
            "tags": frozenset(self._tags),
            "assigned_to": self._assigned_to,
        }
        if self._created_on is not None:
            fields["created_on"] = self._created_on
        if self._id is not None:
            fields["id"] = self._id
        return build_task(**fields)


def build_task(**fields: Any) -> Task:
    """
    Validate fields into a Task, reporting failures as InvalidArgument.

    Raises:
        InvalidArgument: If pydantic rejects any field
    """
    try:
        return Task.model_validate(fields)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise InvalidArgument(
            f"Invalid task field '{location}': {first.get('msg')}",
            field=location or None,
        ) from e
