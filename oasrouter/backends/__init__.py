"""
Adapters between the router and HTTP routing libraries.

The Starlette and Flask adapters live in ``oasrouter.backends.starlette`` and
``oasrouter.backends.flask`` and need the matching extra installed.
"""

from .base import RouterAdapter
from .memory import MemoryAdapter, MemoryRouter, Request, Response

__all__ = [
    "RouterAdapter",
    "MemoryAdapter",
    "MemoryRouter",
    "Request",
    "Response",
]
