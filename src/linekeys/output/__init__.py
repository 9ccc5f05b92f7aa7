"""Serialization of converted entries and file-level conversion."""
