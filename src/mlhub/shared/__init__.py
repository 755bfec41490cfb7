"""Shared helpers used across layers."""
from .timeutil import now, to_date

__all__ = [
    'now',
    'to_date'
]
