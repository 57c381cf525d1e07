"""Application layer: CQRS handlers and the verification session manager."""
