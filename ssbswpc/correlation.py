"""
ssbswpc.correlation
===================

This module computes time-resolved connectivity by sliding a weighted
window across a (modulated) multichannel series.  For each window the
weighted covariance between all pairs of channels is computed, made
exactly symmetric and normalised by the weighted variances to give a
Pearson correlation matrix.  The median sample index of each window is
returned alongside so the estimates can be aligned with the input.

Windows are independent of each other and are evaluated as a batch of
strided views, optionally split into chunks to bound memory use.

Functions
---------

``sliding_weighted_correlation(series, window, chunk_size=None)``
    Correlation matrix per window plus the window centre indices.

``window_centers(n_timepoints, window_size)``
    Median sample index of every complete window.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .errors import ShapeError
from .model import as_timeseries

logger = logging.getLogger(__name__)


def window_centers(n_timepoints: int, window_size: int) -> np.ndarray:
    """Return the median sample index of every complete window.

    Indices are zero based.  For an odd ``window_size`` the result is
    an integer array holding the exact centre sample of each window;
    for an even size the medians fall halfway between two samples and
    a float array is returned.
    """
    n_windows = max(n_timepoints - window_size + 1, 0)
    starts = np.arange(n_windows)
    if window_size % 2 == 1:
        return starts + (window_size - 1) // 2
    return starts + (window_size - 1) / 2.0


def weighted_correlation(blocks: np.ndarray, window: np.ndarray) -> np.ndarray:
    """Weighted Pearson correlation for a batch of windowed blocks.

    Parameters
    ----------
    blocks : np.ndarray
        Array of shape (n, C, L): ``n`` windows of ``L`` samples for
        ``C`` channels.
    window : np.ndarray
        Weights of shape (L,) summing to one.

    Returns
    -------
    np.ndarray
        Array of shape (n, C, C).  Channels with zero weighted variance
        give NaN or Inf entries in their row and column.
    """
    means = blocks @ window
    centered = blocks - means[..., np.newaxis]
    cov = np.einsum('ncl,ndl->ncd', centered * window, centered)
    # rounding can leave the Gram matrix slightly asymmetric
    cov = 0.5 * (cov + np.swapaxes(cov, 1, 2))
    var = np.diagonal(cov, axis1=1, axis2=2)
    with np.errstate(divide='ignore', invalid='ignore'):
        return cov / np.sqrt(var[:, :, np.newaxis] * var[:, np.newaxis, :])


def sliding_weighted_correlation(
    series: np.ndarray,
    window: np.ndarray,
    chunk_size: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Compute a weighted correlation matrix for every window position.

    Parameters
    ----------
    series : np.ndarray
        Array of shape (T, C).
    window : np.ndarray
        Normalised window weights of shape (L,).
    chunk_size : int, optional
        Maximum number of windows evaluated at once.  By default all
        windows are evaluated in a single batch.

    Returns
    -------
    stack : np.ndarray
        Correlation matrices of shape ``(T - L + 1, C, C)``.  Empty
        (first dimension zero) if ``L > T``.
    centers : np.ndarray
        Median sample index of each window, see :func:`window_centers`.

    Raises
    ------
    ShapeError
        If ``series`` is not 2D or ``window`` is not 1D.
    """
    data = as_timeseries(series)
    weights = np.asarray(window, dtype=float)
    if weights.ndim != 1 or weights.size == 0:
        raise ShapeError("window must be a non-empty 1D array")
    T, C = data.shape
    L = weights.size
    centers = window_centers(T, L)
    n_windows = centers.size
    stack = np.empty((n_windows, C, C), dtype=float)
    if n_windows == 0:
        logger.debug("window of %d samples does not fit in %d samples", L, T)
        return stack, centers

    step = n_windows if chunk_size is None else int(chunk_size)
    # shape (n_windows, C, L); a view, no copy
    blocks = sliding_window_view(data, L, axis=0)
    for start in range(0, n_windows, step):
        stop = min(start + step, n_windows)
        stack[start:stop] = weighted_correlation(blocks[start:stop], weights)

    n_bad = int(np.count_nonzero(~np.isfinite(stack).all(axis=(1, 2))))
    if n_bad:
        logger.debug("%d of %d windows contain undefined correlations", n_bad, n_windows)
    return stack, centers


__all__ = [
    'window_centers',
    'weighted_correlation',
    'sliding_weighted_correlation',
]
