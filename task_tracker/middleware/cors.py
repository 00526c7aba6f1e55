"""CORS configuration for the browser client."""
from fastapi.middleware.cors import CORSMiddleware
import logging

from task_tracker.config import ENVIRONMENT, FRONTEND_URL, CORS_ORIGIN_REGEX

logger = logging.getLogger(__name__)

# Base allowed origins for development
ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
]

# Add production frontend URL if provided
if FRONTEND_URL and FRONTEND_URL not in ALLOWED_ORIGINS:
    ALLOWED_ORIGINS.append(FRONTEND_URL)


def add_cors_middleware(app):
    """Add CORS middleware to the FastAPI application."""
    # In production a regex may cover preview deployments of the frontend
    if ENVIRONMENT == "production" and CORS_ORIGIN_REGEX:
        logger.info(f"Using production CORS with origin regex {CORS_ORIGIN_REGEX}")
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=CORS_ORIGIN_REGEX,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        logger.info(f"Using CORS with origins: {ALLOWED_ORIGINS}")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
