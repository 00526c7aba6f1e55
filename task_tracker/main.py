"""Main FastAPI application for the Task Tracker API."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_tracker.config import API_VERSION, LOG_LEVEL
from task_tracker.errors import TaskTrackerError, ValidationError
from task_tracker.middleware.cors import add_cors_middleware
from task_tracker.db.init import init_db
from task_tracker.routers import tasks_router
from task_tracker.utils.logger import configure_logging

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables before the first request is served."""
    init_db()
    logger.info("Application startup complete.")
    yield


# Create FastAPI application
app = FastAPI(
    title="Task Tracker API",
    description="Authenticated, per-user task store with drag-and-drop ordering",
    version=API_VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
add_cors_middleware(app)


@app.exception_handler(TaskTrackerError)
async def task_tracker_error_handler(request: Request, exc: TaskTrackerError):
    """Render classified errors as {"error": {"code", "message", "details"}}."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies with the same shape as store validation errors."""
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    error = ValidationError("Invalid request body", details={"errors": errors})
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": API_VERSION}


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "title": "Task Tracker API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/health",
    }


app.include_router(tasks_router, prefix="/api")  # Task endpoints: /api/tasks


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "task_tracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
