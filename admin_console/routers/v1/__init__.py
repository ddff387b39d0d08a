"""v1 router package — all /api/v1/* endpoints live here.

Files:
  auth.py     — login, logout, current session
  users.py    — directory listing and admin mutations
  uploads.py  — upload manifest and batch upload

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to admin_console/services/.
"""
