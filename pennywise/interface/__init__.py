"""Mini README: Interactive interfaces for Pennywise.

Exports the FastAPI application factory that serves the dashboard and the
JSON endpoints used by its forms.
"""

from .web_app import create_application

__all__ = ["create_application"]
