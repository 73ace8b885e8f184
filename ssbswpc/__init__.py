"""
ssbswpc
=======

Time-resolved connectivity between the channels of a multivariate time
series using single sideband (SSB) modulation followed by sliding
window Pearson correlation (SWPC).

Sliding window correlation acts as a high-pass filter on the signals it
correlates, discarding slow fluctuations that are often the ones of
interest (e.g. in fMRI).  SSB modulation shifts each channel's spectrum
upwards by a chosen frequency before windowing so that this content
survives.

The key modules include:

* ``window`` – normalised rectangular, Gaussian and tapered cosine
  windows.
* ``modulation`` – analytic signal construction and SSB modulation.
* ``correlation`` – weighted Pearson correlation for every window.
* ``vectorize`` – lower triangular vectorisation of correlation stacks.
* ``estimator`` – :class:`SSBSWPCEstimator` and :func:`compute`, tying
  the steps together.
* ``diagnostics`` and ``visualization`` – spectra, high-pass cutoff and
  Plotly figures for choosing the modulation frequency.
* ``io`` – loading time series and saving results.

Example
-------
>>> import numpy as np
>>> from ssbswpc import compute
>>> series = np.random.randn(1000, 10)
>>> connectivity, centers = compute(series, window_size=15, sampling_interval=1.0, modulation_freq=0.1)
"""

from .config import SSBConfig, WindowType
from .errors import ConfigurationError, ShapeError, SSBSWPCError
from .model import DiagnosticSpectra, SSBSWPCResult
from .window import make_window
from .modulation import analytic_signal, ssb_modulate
from .correlation import sliding_weighted_correlation
from .vectorize import lower_triangle_indices, mat2vec, vec2mat
from .estimator import SSBSWPCEstimator, compute

__version__ = '0.1.0'

__all__ = [
    'SSBConfig',
    'WindowType',
    'SSBSWPCError',
    'ConfigurationError',
    'ShapeError',
    'DiagnosticSpectra',
    'SSBSWPCResult',
    'make_window',
    'analytic_signal',
    'ssb_modulate',
    'sliding_weighted_correlation',
    'lower_triangle_indices',
    'mat2vec',
    'vec2mat',
    'SSBSWPCEstimator',
    'compute',
]
