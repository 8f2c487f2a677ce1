"""
Pydantic schema definitions for API responses.
"""
