"""HTTP API for CASEFLOW."""

from .app import create_app

__all__ = ["create_app"]
