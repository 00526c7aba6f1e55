"""
Task service: owner-scoped task storage.

Every method takes the owner id explicitly. Reads start from `_owned()` and
the bulk reorder UPDATE carries the same owner predicate on each row.
"""
from sqlmodel import Session, select
from sqlalchemy import bindparam, update
from sqlalchemy.exc import SQLAlchemyError
from pydantic import ValidationError as PydanticValidationError
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
import logging

from task_tracker.errors import NotFound, StorageError, ValidationError
from task_tracker.models.task import Task, utcnow
from task_tracker.schemas.task import ReorderRequest, TaskCreate, TaskUpdate
from task_tracker.utils.logger import get_logger

logger = logging.getLogger(__name__)
audit = get_logger("task_tracker.store")

# Fields that may be omitted from an update but never explicitly cleared
NON_NULLABLE_FIELDS = ("title", "status", "priority", "tags", "order")


class TaskService:
    """Service class for owner-scoped task CRUD and bulk reordering."""

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def _owned(owner_id: str, entity=Task):
        """Base select scoped to one owner; every read starts here."""
        return select(entity).where(Task.owner_id == owner_id)

    def _commit(self, action: str, refresh: Optional[Task] = None, **context) -> None:
        """Commit, then reload `refresh` if given; any failure becomes StorageError."""
        try:
            self.session.commit()
            if refresh is not None:
                self.session.refresh(refresh)
        except SQLAlchemyError as e:
            self.session.rollback()
            audit.error("store.failure", action=action, error=str(e), **context)
            raise StorageError(f"Failed to {action}") from e

    def list_tasks(self, owner_id: str) -> List[Task]:
        """Get all tasks for an owner, order ascending then newest first."""
        statement = self._owned(owner_id).order_by(Task.order.asc(), Task.created_at.desc())
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            audit.error("store.failure", action="list tasks", owner_id=owner_id, error=str(e))
            raise StorageError("Failed to list tasks") from e

    def get_task(self, owner_id: str, task_id: str) -> Task:
        """
        Get a specific task by ID, ensuring ownership.

        Raises:
            NotFound: If the task does not exist or belongs to another owner
        """
        statement = self._owned(owner_id).where(Task.id == task_id)
        try:
            task = self.session.exec(statement).first()
        except SQLAlchemyError as e:
            audit.error("store.failure", action="get task", task_id=task_id, error=str(e))
            raise StorageError("Failed to load task") from e

        if task is None:
            raise NotFound("Task not found", details={"task_id": task_id})
        return task

    def create_task(self, owner_id: str, fields: Mapping[str, Any]) -> Task:
        """
        Create a new task owned by `owner_id`.

        Args:
            owner_id: Identity resolved by the access guard
            fields: Raw task fields; unknown keys (owner included) are ignored

        Raises:
            ValidationError: If the title is missing/empty or an enum is out of range
        """
        try:
            data = TaskCreate.model_validate(dict(fields))
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e) from e

        now = utcnow()
        task = Task(
            owner_id=owner_id,
            title=data.title,
            description=data.description,
            status=data.status,
            priority=data.priority,
            due_date=data.due_date,
            tags=list(data.tags),
            order=data.order,
            created_at=now,
            updated_at=now,
        )

        self.session.add(task)
        self._commit("create task", refresh=task, owner_id=owner_id)
        logger.info(f"Created task {task.id} for owner {owner_id}")
        return task

    def update_task(self, owner_id: str, task_id: str, fields: Mapping[str, Any]) -> Task:
        """
        Apply a partial update to an owned task.

        Only keys present in `fields` change; the ORM writes only those
        columns, so concurrent updates of different fields both survive.
        """
        try:
            data = TaskUpdate.model_validate(dict(fields))
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e) from e

        changes: Dict[str, Any] = data.model_dump(exclude_unset=True)
        cleared = [name for name in NON_NULLABLE_FIELDS if name in changes and changes[name] is None]
        if cleared:
            raise ValidationError(
                f"Fields cannot be null: {', '.join(cleared)}",
                details={"fields": cleared},
            )
        if "description" in changes and changes["description"] is None:
            changes["description"] = ""

        task = self.get_task(owner_id, task_id)
        for name, value in changes.items():
            setattr(task, name, value)
        task.updated_at = utcnow()

        self._commit("update task", refresh=task, owner_id=owner_id, task_id=task_id)
        return task

    def delete_task(self, owner_id: str, task_id: str) -> None:
        """Delete an owned task. Deleting twice raises NotFound the second time."""
        task = self.get_task(owner_id, task_id)
        self.session.delete(task)
        self._commit("delete task", owner_id=owner_id, task_id=task_id)
        logger.info(f"Deleted task {task_id} for owner {owner_id}")

    def reorder_tasks(self, owner_id: str, items: Iterable[Tuple[str, int]]) -> int:
        """
        Assign new order keys to a batch of the owner's tasks.

        Pairs naming ids the owner does not hold are skipped silently. The
        remaining pairs go out as one executemany UPDATE in a single
        transaction; each row is still guarded by the owner predicate. When
        an id repeats, its last pair wins.

        Returns:
            Number of pairs applied

        Raises:
            ValidationError: If an order is not an integer within 64-bit range
        """
        try:
            batch = ReorderRequest.model_validate(
                {"tasks": [{"id": task_id, "order": order} for task_id, order in items]}
            )
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e) from e

        pairs = [(item.id, item.order) for item in batch.tasks]
        if not pairs:
            return 0

        requested_ids = {task_id for task_id, _ in pairs}
        try:
            owned_ids = set(
                self.session.exec(
                    self._owned(owner_id, Task.id)
                    .where(Task.id.in_(sorted(requested_ids)))
                ).all()
            )
        except SQLAlchemyError as e:
            audit.error("store.failure", action="reorder tasks", owner_id=owner_id, error=str(e))
            raise StorageError("Failed to reorder tasks") from e

        applied = [(task_id, order) for task_id, order in pairs if task_id in owned_ids]
        skipped = sorted(requested_ids - owned_ids)
        if skipped:
            audit.warning("store.reorder_skipped", owner_id=owner_id, task_ids=skipped)
        if not applied:
            return 0

        table = Task.__table__
        statement = (
            update(table)
            .where(table.c.id == bindparam("b_id"))
            .where(table.c.owner_id == owner_id)
            .values(order=bindparam("b_order"), updated_at=bindparam("b_updated_at"))
        )
        now = utcnow()
        params = [
            {"b_id": task_id, "b_order": order, "b_updated_at": now}
            for task_id, order in applied
        ]

        try:
            self.session.connection().execute(statement, params)
        except SQLAlchemyError as e:
            self.session.rollback()
            audit.error("store.failure", action="reorder tasks", owner_id=owner_id, error=str(e))
            raise StorageError("Failed to reorder tasks") from e
        self._commit("reorder tasks", owner_id=owner_id)

        audit.info("store.reordered", owner_id=owner_id, applied=len(applied), skipped=len(skipped))
        return len(applied)
