import numpy as np
import pytest

from ssbswpc.config import SSBConfig, WindowType
from ssbswpc.diagnostics import (
    HALF_POWER,
    N_FFT,
    compute_diagnostic_spectra,
    frequency_axis,
    highpass_cutoff,
    highpass_transfer_function,
    normalized_spectrum,
)
from ssbswpc.modulation import ssb_modulate
from ssbswpc.window import make_window


def test_frequency_axis_spans_zero_to_nyquist():
    f = frequency_axis(2.0)
    assert f.size == N_FFT // 2 + 1
    assert np.isclose(f[0], 0.0)
    assert np.isclose(f[-1], 0.25)


def test_normalized_spectrum_peaks_at_signal_frequency():
    t = np.arange(512)
    x = np.column_stack([np.sin(2 * np.pi * 0.2 * t), np.cos(2 * np.pi * 0.2 * t)])
    spec = normalized_spectrum(x)
    f = frequency_axis(1.0)
    assert np.isclose(spec.max(), 1.0)
    assert abs(f[np.argmax(spec)] - 0.2) < 2.0 / N_FFT


def test_transfer_function_blocks_dc():
    transfer = highpass_transfer_function(make_window(15))
    assert transfer[0] < 1e-12
    assert np.isclose(transfer.max(), 1.0)


def test_rectangular_cutoff_closed_form():
    cutoff = highpass_cutoff(np.zeros(3), np.zeros(3), WindowType.RECTANGULAR, 15, 2.0)
    assert np.isclose(cutoff, 0.88 / np.sqrt(224) / 2.0)
    assert np.isnan(highpass_cutoff(np.zeros(3), np.zeros(3), 'rect', 1, 1.0))


@pytest.mark.parametrize("window_type", ["gaussian", "tapered_cosine"])
def test_numeric_cutoff_is_closest_to_half_power(window_type):
    transfer = highpass_transfer_function(make_window(21, window_type))
    f = frequency_axis(1.0)
    cutoff = highpass_cutoff(transfer, f, window_type, 21, 1.0)
    dist = np.abs(transfer - HALF_POWER)
    hit = int(np.flatnonzero(f == cutoff)[0])
    assert dist[hit] - dist.min() < 1e-5
    assert 0.0 < cutoff < 0.5


def test_modulation_moves_spectrum_above_cutoff():
    rng = np.random.RandomState(0)
    # slow signal: smooth white noise with a long moving average
    raw = np.apply_along_axis(lambda c: np.convolve(c, np.ones(20) / 20, mode='same'), 0, rng.randn(600, 4))
    cfg = SSBConfig(window_size=15, sampling_interval=1.0, modulation_freq=0.15)
    window = make_window(15)
    spectra = compute_diagnostic_spectra(raw, ssb_modulate(raw, 1.0, 0.15), window, cfg)
    f = spectra.frequencies
    raw_peak = f[np.argmax(spectra.raw_spectrum)]
    mod_peak = f[np.argmax(spectra.modulated_spectrum)]
    assert raw_peak < spectra.cutoff_freq < mod_peak
    assert spectra.nyquist == 0.5
    assert spectra.window_type is WindowType.RECTANGULAR
