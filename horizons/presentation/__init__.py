"""Presentation layer (FastAPI)."""
