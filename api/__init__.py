"""
HTTP API for the notification patterns demo.

This package provides a single FastAPI application that exposes:
- Notification creation for each kind (email, SMS)
- Observer registration counts
"""

from api.main import app

__all__ = ["app"]
