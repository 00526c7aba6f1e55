"""Task Tracker API: authenticated, per-user task store."""
