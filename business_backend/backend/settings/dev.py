# backend/settings/dev.py
"""
PATH: backend/settings/dev.py

LOCAL DEVELOPMENT SETTINGS (also used by the test suite)

- SQLite by default (DATABASE_URL overrides)
- Vite dev server allowed as a browser origin
- Transition engine logs at DEBUG unless tests are running
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import LOGGING, TESTING, env  # explicit for Ruff (F405)

DEBUG = True

_FRONTEND_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1", "testserver"])
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=_FRONTEND_ORIGINS)
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=_FRONTEND_ORIGINS)
CORS_ALLOW_CREDENTIALS = True

if not TESTING:
    LOGGING["loggers"]["workflows"]["level"] = env("LOG_LEVEL", default="DEBUG").upper()
