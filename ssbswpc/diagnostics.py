"""
ssbswpc.diagnostics
===================

Spectral diagnostics for choosing the modulation frequency.

Sliding window correlation behaves like a high-pass filter whose
impulse response is a unit impulse at the window centre minus the
window itself.  Signal content below the filter's -3 dB cutoff is
suppressed, which is why SSB modulation shifts the spectrum upwards
first.  The helpers here compute the spectra of the raw and modulated
series, the filter's transfer function and its cutoff so they can be
compared visually (see :mod:`ssbswpc.visualization`).
"""

from __future__ import annotations

import logging
import math

import numpy as np
from scipy.fft import fft, fftshift

from .config import SSBConfig, WindowType
from .model import DiagnosticSpectra, as_timeseries

logger = logging.getLogger(__name__)

N_FFT = 2 ** 8 + 1
# magnitude of -3 dB
HALF_POWER = 10 ** (-3.0 / 20.0)
CUTOFF_TOLERANCE_STEP = 1e-5


def frequency_axis(sampling_interval: float, n_fft: int = N_FFT) -> np.ndarray:
    """Non-negative half of ``linspace(-Fs/2, Fs/2, n_fft)``."""
    fs = 1.0 / sampling_interval
    return np.linspace(-fs / 2.0, fs / 2.0, n_fft)[n_fft // 2:]


def normalized_spectrum(x: np.ndarray, n_fft: int = N_FFT) -> np.ndarray:
    """Channel-averaged magnitude spectrum scaled to a peak of one.

    Only the non-negative frequencies are returned, matching
    :func:`frequency_axis`.
    """
    arr = np.asarray(x)
    mag = np.abs(fftshift(fft(arr, n_fft, axis=0), axes=0))
    if mag.ndim > 1:
        mag = mag.mean(axis=1)
    peak = mag.max()
    if peak > 0:
        mag = mag / peak
    return mag[n_fft // 2:]


def highpass_transfer_function(window: np.ndarray, n_fft: int = N_FFT) -> np.ndarray:
    """Normalised magnitude response of ``delta - window``.

    The impulse sits at sample ``(L - 1) // 2``, the window centre for
    odd lengths.
    """
    w = np.asarray(window, dtype=float)
    delta = np.zeros_like(w)
    delta[(w.size - 1) // 2] = 1.0
    return normalized_spectrum(delta - w, n_fft)


def highpass_cutoff(
    transfer: np.ndarray,
    frequencies: np.ndarray,
    window_type: WindowType,
    window_size: int,
    sampling_interval: float,
) -> float:
    """Locate the -3 dB cutoff of the sliding window high-pass filter.

    For a rectangular window the closed form
    ``0.88 / sqrt(L**2 - 1) * Fs`` is used.  Otherwise the tolerance
    around the half-power level is widened in steps of
    ``CUTOFF_TOLERANCE_STEP`` until at least one frequency bin falls
    inside it, and the lowest such frequency is returned.
    """
    if WindowType.parse(window_type) is WindowType.RECTANGULAR:
        if window_size < 2:
            return math.nan
        return 0.88 / math.sqrt(window_size ** 2 - 1) / sampling_interval

    dist = np.abs(np.asarray(transfer) - HALF_POWER)
    if not np.isfinite(dist).any():
        return math.nan
    # smallest tolerance step that admits the closest bin
    n_steps = math.floor(np.nanmin(dist) / CUTOFF_TOLERANCE_STEP) + 1
    hits = np.flatnonzero(dist < n_steps * CUTOFF_TOLERANCE_STEP)
    return float(frequencies[hits[0]])


def compute_diagnostic_spectra(
    series: np.ndarray,
    modulated: np.ndarray,
    window: np.ndarray,
    config: SSBConfig,
) -> DiagnosticSpectra:
    """Collect everything the diagnostic plot needs.

    Parameters
    ----------
    series : np.ndarray
        Raw input of shape (T, C).
    modulated : np.ndarray
        SSB modulated series of the same shape.
    window : np.ndarray
        Normalised window weights.
    config : SSBConfig
        Estimator configuration (sampling interval and window type).
    """
    freqs = frequency_axis(config.sampling_interval)
    transfer = highpass_transfer_function(window)
    cutoff = highpass_cutoff(
        transfer, freqs, config.window_type, len(window), config.sampling_interval,
    )
    logger.info("high-pass cutoff of the %s window: %.4g", config.window_type.value, cutoff)
    return DiagnosticSpectra(
        frequencies=freqs,
        raw_spectrum=normalized_spectrum(as_timeseries(series)),
        modulated_spectrum=normalized_spectrum(as_timeseries(modulated)),
        transfer_function=transfer,
        cutoff_freq=cutoff,
        sampling_rate=config.sampling_rate,
        window_type=config.window_type,
    )


__all__ = [
    'N_FFT',
    'HALF_POWER',
    'frequency_axis',
    'normalized_spectrum',
    'highpass_transfer_function',
    'highpass_cutoff',
    'compute_diagnostic_spectra',
]
