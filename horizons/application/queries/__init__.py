"""Read-only queries (CQRS read operations)."""

from horizons.application.queries.signature_link_queries import ResolveSignatureLink

__all__ = ["ResolveSignatureLink"]
