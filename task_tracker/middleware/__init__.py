"""Middleware package for the Task Tracker API."""
