"""Task router: REST transport for the owner-scoped task store."""
import json

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError as PydanticValidationError
from typing import Any, Dict, List

from task_tracker.errors import ValidationError
from task_tracker.schemas.task import (
    MessageResponse,
    ReorderRequest,
    ReorderResponse,
    TaskResponse,
)
from task_tracker.services.task_service import TaskService
from task_tracker.middleware.auth import get_current_user, CurrentUser
from task_tracker.db.config import get_session
from sqlmodel import Session

# Every route resolves the owner first; nothing below runs without one
router = APIRouter(prefix="/tasks", tags=["Tasks"])  # main.py adds the /api prefix


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Dependency for getting TaskService instance."""
    return TaskService(session)


async def read_task_fields(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
) -> Dict[str, Any]:
    """Read the JSON object body once the caller has been identified."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError("Invalid request body", details={"errors": [
            {"field": "body", "message": "Body is not valid JSON"},
        ]}) from e
    if not isinstance(body, dict):
        raise ValidationError("Invalid request body", details={"errors": [
            {"field": "body", "message": "Body must be a JSON object"},
        ]})
    return body


async def read_reorder_request(
    fields: Dict[str, Any] = Depends(read_task_fields),
) -> ReorderRequest:
    """Parse a reorder batch from the already-authorized body."""
    try:
        return ReorderRequest.model_validate(fields)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """List the caller's tasks in display order."""
    return service.list_tasks(current_user.owner_id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    current_user: CurrentUser = Depends(get_current_user),
    fields: Dict[str, Any] = Depends(read_task_fields),
    service: TaskService = Depends(get_task_service),
):
    """Create a task owned by the caller."""
    return service.create_task(current_user.owner_id, fields)


# Declared before /{task_id} so "reorder" is never taken for a task id
@router.put("/reorder", response_model=ReorderResponse)
def reorder_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    payload: ReorderRequest = Depends(read_reorder_request),
    service: TaskService = Depends(get_task_service),
):
    """Apply a drag-and-drop reorder batch."""
    updated = service.reorder_tasks(
        current_user.owner_id,
        [(item.id, item.order) for item in payload.tasks],
    )
    return ReorderResponse(message="Tasks reordered successfully", updated=updated)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Get a specific task by ID."""
    return service.get_task(current_user.owner_id, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    fields: Dict[str, Any] = Depends(read_task_fields),
    service: TaskService = Depends(get_task_service),
):
    """Update only the fields present in the request body."""
    return service.update_task(current_user.owner_id, task_id, fields)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Delete a task."""
    service.delete_task(current_user.owner_id, task_id)
    return MessageResponse(message="Task deleted successfully")
