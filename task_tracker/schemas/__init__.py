"""Schemas package for the Task Tracker API."""
