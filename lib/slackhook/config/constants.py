"""
slackhook - Constants
=====================
Severity levels, color table, and default values used by the hook
and the webhook client.
"""

import logging
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

# Version identifier
SLACKHOOK_VERSION = "1.0.0"
PACKAGE_NAME = "slackhook"

# =============================================================================
# SEVERITY LEVELS
# =============================================================================


class Level(IntEnum):
    """Log severities, numbered to line up with the stdlib logging levels."""
    DEBUG = logging.DEBUG        # 10
    INFO = logging.INFO          # 20
    WARN = logging.WARNING       # 30
    ERROR = logging.ERROR        # 40
    FATAL = logging.CRITICAL     # 50
    PANIC = 60

# Canonical ordering, least to most severe
ALL_LEVELS: Tuple[Level, ...] = (
    Level.DEBUG,
    Level.INFO,
    Level.WARN,
    Level.ERROR,
    Level.FATAL,
    Level.PANIC,
)

# =============================================================================
# ATTACHMENT COLORS
# =============================================================================

_LEVEL_COLORS: Dict[int, str] = {
    Level.DEBUG: '#9B30FF',
    Level.INFO: 'good',
    Level.WARN: 'warning',
    Level.ERROR: 'danger',
    Level.FATAL: 'danger',
    Level.PANIC: 'danger',
}

LEVEL_COLOR_MAP: Mapping[int, str] = MappingProxyType(_LEVEL_COLORS)

# =============================================================================
# DELIVERY
# =============================================================================

TIMEOUT_ERROR_MESSAGE: str = "Request timed out"

# Expected status for a delivered webhook post
WEBHOOK_SUCCESS_STATUS: int = 200

# Logger namespace used by this library; records from it are never forwarded
INTERNAL_LOGGER_NAME: str = PACKAGE_NAME
