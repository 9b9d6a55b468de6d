"""
Thumbnail Studio backend.

Generates thumbnail images from text prompts via Google Gemini, stores them
in S3-compatible object storage, and records metadata in PostgreSQL.
"""

__version__ = "0.1.0"
