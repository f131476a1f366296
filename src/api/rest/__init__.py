"""
REST API package.

Contains the HTTP endpoints for user registration.
"""

from src.api.rest.routes import router

__all__ = ["router"]
