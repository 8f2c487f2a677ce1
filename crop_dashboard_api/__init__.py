"""
Top-level package for the Crop Price Dashboard API.

All functionality lives in submodules under ``app``; import
``crop_dashboard_api.app.main`` for the application factory.
"""

__all__ = []
