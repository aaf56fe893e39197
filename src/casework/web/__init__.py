"""FastAPI REST API for cabinet BOM and drawing generation.

Usage:
    uvicorn casework.web:app --reload
"""

from casework.web.app import app, create_app

__all__ = ["app", "create_app"]
