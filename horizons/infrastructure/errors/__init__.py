"""Infrastructure errors package.

Usage:
    from horizons.infrastructure.errors import CacheError
"""

from horizons.infrastructure.errors.infrastructure_error import (
    CacheError,
    InfrastructureError,
)

__all__ = [
    "InfrastructureError",
    "CacheError",
]
