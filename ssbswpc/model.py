"""
ssbswpc.model
=============

Dataclasses that hold the outputs of SSB + SWPC estimation.

``DiagnosticSpectra``
    Normalised magnitude spectra of the raw and modulated series, the
    transfer function of the implicit high-pass filter and its -3 dB
    cutoff.  Consumed by :mod:`ssbswpc.visualization`.

``SSBSWPCResult``
    The vectorised connectivity time series together with the window
    centre indices and the intermediate arrays it was derived from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from .config import SSBConfig, WindowType
from .errors import ShapeError


def as_timeseries(series: Any) -> np.ndarray:
    """Return ``series`` as a float array of shape (T, C).

    Raises
    ------
    ShapeError
        If the input is not two-dimensional.
    """
    arr = np.asarray(series, dtype=float)
    if arr.ndim != 2:
        raise ShapeError(f"series must be a 2D array of shape (T, C), got {arr.ndim} dimension(s)")
    return arr


@dataclass
class DiagnosticSpectra:
    """Spectral view of the modulation and of the window's high-pass filter.

    Attributes
    ----------
    frequencies : np.ndarray
        Non-negative frequency axis, shape ``(n_freq,)``.
    raw_spectrum : np.ndarray
        Channel-averaged magnitude spectrum of the input, scaled to a
        maximum of one.
    modulated_spectrum : np.ndarray
        Same for the SSB modulated series.
    transfer_function : np.ndarray
        Normalised magnitude response of ``delta - window``.
    cutoff_freq : float
        Frequency of the -3 dB point of ``transfer_function``.
    sampling_rate : float
        Sampling rate of the series (``1 / sampling_interval``).
    window_type : WindowType
        Window shape the transfer function was computed for.
    """

    frequencies: np.ndarray
    raw_spectrum: np.ndarray
    modulated_spectrum: np.ndarray
    transfer_function: np.ndarray
    cutoff_freq: float
    sampling_rate: float
    window_type: WindowType

    @property
    def nyquist(self) -> float:
        return 0.5 * self.sampling_rate


@dataclass
class SSBSWPCResult:
    """Time-resolved connectivity estimated with SSB + SWPC.

    Parameters
    ----------
    connectivity : np.ndarray
        Array of shape ``(n_windows, C*(C-1)/2)`` with the strictly
        lower triangular correlations of each window.
    window_center_index : np.ndarray
        Median sample index of each window, shape ``(n_windows,)``.
    correlation_stack : np.ndarray
        Full correlation matrices, shape ``(n_windows, C, C)``.
    modulated : np.ndarray
        The SSB modulated series the correlations were computed on.
    window : np.ndarray
        Normalised window weights.
    tril_index : np.ndarray
        Flat indices used to vectorise each matrix, see
        :func:`ssbswpc.vectorize.lower_triangle_indices`.
    config : SSBConfig
        Configuration the result was produced with.
    diagnostics : DiagnosticSpectra | None
        Present when diagnostics were enabled.
    extra : dict
        Free-form additional outputs, e.g. the diagnostic figure.
    """

    connectivity: np.ndarray
    window_center_index: np.ndarray
    correlation_stack: np.ndarray
    modulated: np.ndarray
    window: np.ndarray
    tril_index: np.ndarray
    config: SSBConfig
    diagnostics: Optional[DiagnosticSpectra] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_windows(self) -> int:
        return self.correlation_stack.shape[0]

    @property
    def n_channels(self) -> int:
        return self.correlation_stack.shape[1]

    def edge_pairs(self) -> List[Tuple[int, int]]:
        """Return ``(row, col)`` channel pairs in connectivity column order."""
        n = self.n_channels
        return [(int(i // n), int(i % n)) for i in self.tril_index]

    def get_edge_timeseries(self, i: int, j: int) -> np.ndarray:
        """Get the correlation time series between channels ``i`` and ``j``."""
        return self.correlation_stack[:, i, j]

    def to_dataframe(self, labels: Optional[List[str]] = None) -> pd.DataFrame:
        """Return the connectivity as a DataFrame indexed by window centre.

        Columns are named ``'<row>-<col>'`` using ``labels`` when given,
        otherwise the channel indices.
        """
        n = self.n_channels
        if labels is None:
            labels = [str(k) for k in range(n)]
        elif len(labels) != n:
            raise ValueError("Number of labels must match number of channels")
        columns = [f"{labels[r]}-{labels[c]}" for r, c in self.edge_pairs()]
        index = pd.Index(self.window_center_index, name='window_center')
        return pd.DataFrame(self.connectivity, index=index, columns=columns)


__all__ = [
    'as_timeseries',
    'DiagnosticSpectra',
    'SSBSWPCResult',
]
