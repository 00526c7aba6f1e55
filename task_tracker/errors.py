"""
Error taxonomy for the Task Tracker API.

Every failure the core reports carries a classification code:
- Unauthorized: missing or invalid credential, raised before any store access
- NotFound: task absent or owned by someone else (indistinguishable on purpose)
- ValidationError: malformed fields on create, update or reorder
- StorageError: unexpected persistence failure, never retried here
"""

from typing import Any, Dict, Optional


class TaskTrackerError(Exception):
    """Base exception for classified Task Tracker errors"""

    code = "Error"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class Unauthorized(TaskTrackerError):
    code = "Unauthorized"
    status_code = 401


class NotFound(TaskTrackerError):
    code = "NotFound"
    status_code = 404


class ValidationError(TaskTrackerError):
    code = "ValidationError"
    status_code = 400

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        """Build from a pydantic ValidationError, one entry per failing field."""
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]),
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        message = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        return cls(message or "Invalid fields", details={"errors": errors})


class StorageError(TaskTrackerError):
    code = "StorageError"
    status_code = 500
