"""Shared utilities for the Task Tracker API."""
