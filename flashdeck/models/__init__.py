"""Data models."""

from .card import Card, DatasetDescriptor, RawPair, SessionState

__all__ = ['Card', 'DatasetDescriptor', 'RawPair', 'SessionState']
