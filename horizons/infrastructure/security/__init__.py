"""Security services package."""

from horizons.infrastructure.security.token_codec import TokenCodec

__all__ = ["TokenCodec"]
