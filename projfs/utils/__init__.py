"""Utility helpers for projfs."""
from . import exceptions

__all__ = ['exceptions']
