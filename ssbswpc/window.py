"""
ssbswpc.window
==============

This module builds the weighting kernels used by the sliding window
correlation.  Each kernel is a non-negative vector that sums to one,
so it can serve both as the weights of a weighted Pearson correlation
and as a smoothing (low-pass) filter whose complement is the implicit
high-pass filter of sliding window correlation.

Functions
---------

``make_window(length, window_type)``
    Return a normalised rectangular, Gaussian or tapered cosine window.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Union

import numpy as np
from scipy.signal import windows

from .config import WindowType
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Gaussian shape parameter: std = (L - 1) / (2 * alpha)
GAUSSIAN_ALPHA = 2.5
# fraction of the tapered cosine window inside the cosine lobes
TAPER_RATIO = 0.5


def make_window(length: int, window_type: Union[WindowType, str] = WindowType.RECTANGULAR) -> np.ndarray:
    """Create a normalised window of ``length`` samples.

    Parameters
    ----------
    length : int
        Number of samples.  Must be a positive integer.
    window_type : WindowType or str, optional
        ``'rectangular'`` (default), ``'gaussian'`` or
        ``'tapered_cosine'``.

    Returns
    -------
    np.ndarray
        One-dimensional array of shape ``(length,)`` whose entries are
        non-negative and sum to one.

    Raises
    ------
    ConfigurationError
        If the length is not a positive integer or the window type is
        not recognised.
    """
    if not isinstance(length, Integral) or isinstance(length, bool) or length <= 0:
        raise ConfigurationError(f"window length must be a positive integer, got {length!r}")
    length = int(length)
    wtype = WindowType.parse(window_type)

    if wtype is WindowType.RECTANGULAR:
        win = windows.boxcar(length)
    elif wtype is WindowType.GAUSSIAN:
        win = windows.gaussian(length, std=(length - 1) / (2.0 * GAUSSIAN_ALPHA))
    else:
        win = windows.tukey(length, alpha=TAPER_RATIO)

    total = win.sum()
    if total <= 0:
        # a two-sample tukey window has zero weight at both ends
        logger.warning(
            "%s window of length %d has no weight; using a rectangular window",
            wtype.value, length,
        )
        win = np.ones(length)
        total = float(length)
    return win / total


__all__ = [
    'make_window',
    'GAUSSIAN_ALPHA',
    'TAPER_RATIO',
]
