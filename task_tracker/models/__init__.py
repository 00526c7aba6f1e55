"""Models package for the Task Tracker API."""
