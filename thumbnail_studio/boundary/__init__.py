"""Boundary adapters for external systems: object storage, identity, Gemini and the metadata database."""
