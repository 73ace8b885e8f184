"""
ssbswpc.config
==============

This module defines the configuration record for the SSB + SWPC
estimator.  :class:`SSBConfig` gathers the window, sampling and
modulation parameters as named fields and validates them before any
computation takes place.  :class:`WindowType` is the closed set of
supported window shapes.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from numbers import Integral, Real
from typing import Optional, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class WindowType(str, Enum):
    """Shape of the sliding window used as correlation weight."""

    RECTANGULAR = 'rectangular'
    GAUSSIAN = 'gaussian'
    TAPERED_COSINE = 'tapered_cosine'

    @classmethod
    def parse(cls, value: Union['WindowType', str]) -> 'WindowType':
        """Convert a member or its name to a :class:`WindowType`.

        Besides the canonical values the short names ``'rect'``,
        ``'gauss'`` and ``'tukey'`` are accepted.

        Raises
        ------
        ConfigurationError
            If ``value`` does not name a supported window.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace('-', '_')
            key = _WINDOW_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        choices = ', '.join(m.value for m in cls)
        raise ConfigurationError(f"Unknown window type {value!r}; expected one of: {choices}")


_WINDOW_ALIASES = {
    'rect': 'rectangular',
    'boxcar': 'rectangular',
    'gauss': 'gaussian',
    'tukey': 'tapered_cosine',
}


@dataclass
class SSBConfig:
    """Configuration options for SSB + SWPC connectivity estimation.

    Attributes
    ----------
    window_size : int
        Number of samples in each sliding window.  Odd sizes give an
        integer window centre; even sizes are accepted with a warning.
    sampling_interval : float
        Time between consecutive samples (the TR for fMRI data).
    modulation_freq : float
        Frequency of the complex carrier used for single sideband
        modulation, in the reciprocal unit of ``sampling_interval``.
        It should lie between the high-pass cutoff of the window and
        the Nyquist frequency.
    window_type : WindowType or str, optional
        Window shape.  Defaults to ``'rectangular'``.
    enable_diagnostics : bool, optional
        If True, spectra of the raw and modulated series and the
        high-pass transfer function of the window are computed and
        plotted.  Defaults to False.
    chunk_size : int | None, optional
        Maximum number of windows evaluated in one vectorised batch.
        ``None`` evaluates every window at once.
    strict_frequency : bool, optional
        If True, a modulation frequency outside ``(0, Fs/2)`` raises
        :class:`ConfigurationError` instead of logging a warning.
    output_dir : str | None, optional
        If provided, :class:`ssbswpc.estimator.SSBSWPCEstimator` writes
        its results to this directory using :mod:`ssbswpc.io`.
    """

    window_size: int
    sampling_interval: float
    modulation_freq: float
    window_type: WindowType = WindowType.RECTANGULAR
    enable_diagnostics: bool = False
    chunk_size: Optional[int] = None
    strict_frequency: bool = False
    output_dir: Optional[str] = None

    def __post_init__(self) -> None:
        self.window_type = WindowType.parse(self.window_type)

    @property
    def sampling_rate(self) -> float:
        return 1.0 / self.sampling_interval

    @property
    def nyquist(self) -> float:
        return 0.5 / self.sampling_interval

    def validate(self, n_timepoints: Optional[int] = None) -> None:
        """Validate configuration parameters, optionally against the data.

        Parameters
        ----------
        n_timepoints : int, optional
            Number of samples in the time series that will be analysed.
            Only used to report when no complete window fits.

        Raises
        ------
        ConfigurationError
            If a field has the wrong type or an impossible value.
        """
        if not _is_int(self.window_size) or self.window_size <= 0:
            raise ConfigurationError("window_size must be a positive integer")
        if not _is_real(self.sampling_interval) or not self.sampling_interval > 0:
            raise ConfigurationError("sampling_interval must be a positive number")
        if not math.isfinite(self.sampling_interval):
            raise ConfigurationError("sampling_interval must be finite")
        if not _is_real(self.modulation_freq) or not math.isfinite(self.modulation_freq):
            raise ConfigurationError("modulation_freq must be a finite number")
        if not isinstance(self.enable_diagnostics, bool):
            raise ConfigurationError("enable_diagnostics must be True or False")
        if self.chunk_size is not None and (not _is_int(self.chunk_size) or self.chunk_size <= 0):
            raise ConfigurationError("chunk_size must be a positive integer or None")

        if self.window_size % 2 == 0:
            logger.warning(
                "window size %d is even; window centres fall between samples",
                self.window_size,
            )
        self._check_modulation_freq()
        if n_timepoints is not None and self.window_size > n_timepoints:
            logger.warning(
                "window size %d exceeds the %d available samples; no windows will be produced",
                self.window_size, n_timepoints,
            )

    def _check_modulation_freq(self) -> None:
        if 0 < self.modulation_freq < self.nyquist:
            return
        msg = (
            f"modulation_freq {self.modulation_freq:g} is outside (0, {self.nyquist:g}); "
            "the modulated spectrum will alias or stay inside the high-pass stopband"
        )
        if self.strict_frequency:
            raise ConfigurationError(msg)
        logger.warning(msg)


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_real(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


__all__ = [
    'WindowType',
    'SSBConfig',
]
