"""Task model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
import uuid


def utcnow() -> datetime:
    """Current UTC time, used for store-managed timestamps."""
    return datetime.now(timezone.utc)


class TaskStatus(str, Enum):
    """Task workflow status"""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Task priority level"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(SQLModel, table=True):
    """Task entity owned by exactly one user and positioned by its order key."""

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
    )
    # Set once at creation; nothing in the service layer writes it afterwards
    owner_id: str = Field(index=True, max_length=255)
    title: str = Field(max_length=200, min_length=1)
    description: str = Field(default="", max_length=1000)
    status: str = Field(default=TaskStatus.PENDING.value, max_length=20)
    priority: str = Field(default=TaskPriority.MEDIUM.value, max_length=20)
    due_date: Optional[datetime] = Field(default=None)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    # Loose sort key within one owner's list; neither unique nor contiguous
    order: int = Field(default=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
