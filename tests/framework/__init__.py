"""
Test framework running the same tests against every routing library backend.
"""

from .drivers import BackendDriver, FlaskDriver, HttpResponse, MemoryDriver, StarletteDriver

__all__ = [
    'BackendDriver',
    'HttpResponse',
    'MemoryDriver',
    'StarletteDriver',
    'FlaskDriver',
]
