"""
Application package initializer.

The API is split into configuration and storage (``core``), response
models (``schemas``), queries (``services``) and HTTP routes
(``api``).  The bundled single-page frontend lives in ``static``.
"""

from .main import app  # noqa: F401
