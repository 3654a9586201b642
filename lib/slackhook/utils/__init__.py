"""
Utilities module - Concurrency helpers.
"""

from .once import Once

__all__ = [
    "Once",
]
