"""
Tool Rental HTTP API

Usage:
    from toolrental.api import create_app

    app = create_app()                 # bundled or TOOLRENTAL_DATA_DIR data
    app = create_app(reference_data)   # injected data
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
