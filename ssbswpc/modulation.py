"""
ssbswpc.modulation
==================

Single sideband (SSB) modulation of multichannel time series.

Each channel is turned into its analytic signal (the signal plus ``i``
times its Hilbert transform), multiplied by a complex carrier
``exp(i 2 pi f t)`` and projected back onto the real axis.  Because the
analytic signal has a one-sided spectrum, the product shifts the
spectrum up by ``f`` without creating a mirrored lower sideband.  The
shifted signal keeps its low-frequency content clear of the high-pass
stopband of sliding window correlation.
"""

from __future__ import annotations

import logging

import numpy as np
from scipy.signal import hilbert

from .model import as_timeseries

logger = logging.getLogger(__name__)


def analytic_signal(series: np.ndarray) -> np.ndarray:
    """Return the analytic signal of every column of ``series``.

    Parameters
    ----------
    series : np.ndarray
        Real array of shape (T, C).

    Returns
    -------
    np.ndarray
        Complex array of shape (T, C) whose real part equals ``series``.
    """
    return hilbert(as_timeseries(series), axis=0)


def modulation_carrier(n_samples: int, sampling_interval: float, modulation_freq: float) -> np.ndarray:
    """Complex carrier ``exp(i 2 pi f t)`` sampled at ``t = 0, dt, ..., (n-1) dt``."""
    t = np.arange(n_samples) * sampling_interval
    return np.exp(1j * 2.0 * np.pi * modulation_freq * t)


def ssb_modulate(series: np.ndarray, sampling_interval: float, modulation_freq: float) -> np.ndarray:
    """Frequency-shift ``series`` by ``modulation_freq`` using SSB modulation.

    Parameters
    ----------
    series : np.ndarray
        Real array of shape (T, C).  The input should be band limited
        so that the shifted spectrum stays below the Nyquist frequency.
    sampling_interval : float
        Time between samples.
    modulation_freq : float
        Carrier frequency.  The caller is responsible for choosing a
        value between the window's high-pass cutoff and ``Fs/2``.

    Returns
    -------
    np.ndarray
        Real array with the same shape as ``series``.
    """
    analytic = analytic_signal(series)
    carrier = modulation_carrier(analytic.shape[0], sampling_interval, modulation_freq)
    logger.debug(
        "modulating %d channel(s) of %d samples at %g",
        analytic.shape[1], analytic.shape[0], modulation_freq,
    )
    return np.real(analytic * carrier[:, np.newaxis])


__all__ = [
    'analytic_signal',
    'modulation_carrier',
    'ssb_modulate',
]
