"""Pydantic schemas package.

Folder intent:
  common.py     — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  auth.py       — login request, principal and navigation
  directory.py  — directory record DTOs and the paginated directory page
  upload.py     — upload manifest entries and batch results
  views.py      — view models served by the guarded console views
"""
