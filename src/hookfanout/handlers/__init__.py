"""
Module: handlers
Description: Package initialization for API endpoint handlers.

This package contains FastAPI route handlers for the hook dispatcher:
- hooks: Trigger endpoint fanning out to registered hooks

Handlers use dependency injection for the endpoint source, dispatcher
and metrics client.
"""

__all__ = []
