"""Routers package for the Task Tracker API."""

from .tasks import router as tasks_router

__all__ = ["tasks_router"]
