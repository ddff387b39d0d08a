"""Services package — all business logic lives here, never in routers.

Files:
  session.py    — Session (principal + per-session list state) and SessionRegistry
  guard.py      — view guard: redirect anonymous visitors to the login view
  listing.py    — directory filter/paginate engine
  directory.py  — admin-only directory mutations + listing
  upload.py     — upload validation and manifest
  seed.py       — startup fetch of the demo directory
  outcome.py    — MutationResult returned by gated operations

Rule: routers call services, services call repositories.
      No FastAPI imports in services.
"""
