"""
API package containing the HTTP routes.

``router`` includes the routers defined in ``endpoints``.
"""
