"""
App assembly entry point.

Re-exports the FastAPI `app` from `valueflows.api.main`.
"""

from valueflows.api.main import app  # noqa: F401
