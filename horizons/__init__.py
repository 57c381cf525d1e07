"""Horizons API - verification-token backend for the Horizons HR platform."""
