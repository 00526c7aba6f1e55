"""Environment configuration for the Task Tracker API."""
import os
from dotenv import load_dotenv

# Load environment variables from a local .env file when present
load_dotenv()

# Database
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./task_tracker.db")
DB_ECHO = os.environ.get("DB_ECHO", "false").lower() in ("1", "true", "yes")

# Identity collaborator (token validation only, issuance happens elsewhere)
AUTH_SECRET = os.environ.get("AUTH_SECRET")
AUTH_ALGORITHM = os.environ.get("AUTH_ALGORITHM", "HS256")

# HTTP
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")
CORS_ORIGIN_REGEX = os.environ.get("CORS_ORIGIN_REGEX")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

API_VERSION = "1.0.0"
