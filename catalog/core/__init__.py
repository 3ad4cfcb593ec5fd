"""
Core utilities shared across the catalog.

This package hosts:
- configuration helpers (env vars, file paths)
- logging setup used by the app factory and the maintenance scripts

Repositories and routers depend on these primitives instead of reading
os.environ directly.
"""
