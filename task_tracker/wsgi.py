"""Serverless entry point: adapts the ASGI app to AWS Lambda events."""
from mangum import Mangum

from task_tracker.main import app

# "auto" runs the app lifespan on cold start, so tables exist before the first event
handler = Mangum(app, lifespan="auto")
