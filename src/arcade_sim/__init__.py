"""Deterministic cores for a small arcade collection: grid snake and obstacle flyer."""

__version__ = "0.1.0"
