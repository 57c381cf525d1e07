"""Core enums package.

Usage:
    from horizons.core.enums import ErrorCode, Environment
"""

from horizons.core.enums.environment import Environment
from horizons.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
