"""
Vidnest API package.

Provides the FastAPI application for the Vidnest backend.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
