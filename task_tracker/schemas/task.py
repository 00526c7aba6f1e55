"""Task schemas for request validation and API responses."""
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator
from datetime import datetime
from typing import Optional, List

from task_tracker.models.task import TaskStatus, TaskPriority

# Range of the 64-bit INTEGER column backing Task.order
ORDER_MIN = -(2**63)
ORDER_MAX = 2**63 - 1


class TaskCreate(BaseModel):
    """Schema for creating a task. Only the title is required."""
    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_default=True,
    )

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=1000)
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("due_date", "dueDate")
    )
    tags: List[str] = Field(default_factory=list)
    order: int = Field(default=0, ge=ORDER_MIN, le=ORDER_MAX)

    @field_validator("description", mode="before")
    @classmethod
    def none_description_is_empty(cls, value):
        return "" if value is None else value


class TaskUpdate(BaseModel):
    """Schema for partial task updates; only keys present in the payload apply."""
    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        use_enum_values=True,
    )

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("due_date", "dueDate")
    )
    tags: Optional[List[str]] = None
    order: Optional[int] = Field(None, ge=ORDER_MIN, le=ORDER_MAX)


class ReorderItem(BaseModel):
    """One (id, order) pair of a reorder batch."""
    id: str = Field(..., min_length=1, validation_alias=AliasChoices("id", "_id"))
    order: int = Field(..., ge=ORDER_MIN, le=ORDER_MAX)


class ReorderRequest(BaseModel):
    """Schema for the bulk reorder call."""
    tasks: List[ReorderItem]


class ReorderResponse(BaseModel):
    message: str
    updated: int


class MessageResponse(BaseModel):
    message: str


class TaskResponse(BaseModel):
    """Schema for task API responses."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime] = None
    tags: List[str] = []
    order: int
    created_at: datetime
    updated_at: datetime
