"""
jsonheal Limits and Exceptions.

This module provides input limits and exception types.
"""

from .exceptions import HealError, SecurityError, UnrecoverableError
from .limits import LimitValidator

__all__ = ['HealError', 'SecurityError', 'UnrecoverableError', 'LimitValidator']
