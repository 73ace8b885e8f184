"""
ssbswpc.errors
==============

Exception types raised by the package.  Both concrete errors derive
from :class:`ValueError` so callers that already guard estimator calls
with ``except ValueError`` keep working.
"""

from __future__ import annotations


class SSBSWPCError(Exception):
    """Base class for all errors raised by :mod:`ssbswpc`."""


class ConfigurationError(SSBSWPCError, ValueError):
    """Invalid estimator configuration (window type, sizes, flags)."""


class ShapeError(SSBSWPCError, ValueError):
    """Array input with the wrong dimensionality or non-square matrices."""


__all__ = [
    'SSBSWPCError',
    'ConfigurationError',
    'ShapeError',
]
