"""FastAPI REST API for the sheet stock inventory.

Usage:
    from sheetstock.web import create_app
    app = create_app()
"""

from sheetstock.web.app import create_app

__all__ = ["create_app"]
