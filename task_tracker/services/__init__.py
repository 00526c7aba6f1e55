"""Services package for the Task Tracker API."""
