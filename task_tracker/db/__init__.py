"""Db package for the Task Tracker API."""
