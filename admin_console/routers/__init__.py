"""Routers package — HTTP endpoint definitions.

Files:
  views.py  — guarded console views (/login, /dashboard, /users, /uploads)
  deps.py   — session lookup, guards and service wiring
  v1/       — Versioned API routes (/api/v1/*)
"""
