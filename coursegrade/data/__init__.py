"""
Data persistence module.

This package handles all file I/O and conversion between models and JSON.
"""

from .store import StateStore
from . import serializer

__all__ = ["StateStore", "serializer"]
