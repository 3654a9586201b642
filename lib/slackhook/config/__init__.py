"""
Configuration module - Levels, colors, and delivery constants.
"""

from .constants import (
    SLACKHOOK_VERSION,
    Level,
    ALL_LEVELS,
    LEVEL_COLOR_MAP,
    TIMEOUT_ERROR_MESSAGE,
)

__all__ = [
    "SLACKHOOK_VERSION",
    "Level",
    "ALL_LEVELS",
    "LEVEL_COLOR_MAP",
    "TIMEOUT_ERROR_MESSAGE",
]
