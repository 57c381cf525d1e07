"""Query handlers."""

from horizons.application.queries.handlers.resolve_signature_link_handler import (
    ResolveSignatureLinkHandler,
    SignatureLinkTarget,
)

__all__ = ["ResolveSignatureLinkHandler", "SignatureLinkTarget"]
