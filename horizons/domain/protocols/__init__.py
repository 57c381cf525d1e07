"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; nothing inherits from
them.
"""

from horizons.domain.protocols.auth_provider_protocol import AuthProviderProtocol
from horizons.domain.protocols.cache_protocol import CacheProtocol
from horizons.domain.protocols.email_protocol import EmailProtocol, EmailReceipt
from horizons.domain.protocols.logger_protocol import LoggerProtocol
from horizons.domain.protocols.profile_repository import ProfileRepository
from horizons.domain.protocols.token_codec_protocol import TokenCodecProtocol

__all__ = [
    "AuthProviderProtocol",
    "CacheProtocol",
    "EmailProtocol",
    "EmailReceipt",
    "LoggerProtocol",
    "ProfileRepository",
    "TokenCodecProtocol",
]
