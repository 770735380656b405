"""Persisted state and helpers for the chanboard imageboard."""

__version__ = "0.1.0"
