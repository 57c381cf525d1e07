"""Core layer: configuration, Result types, shared errors and the container."""
