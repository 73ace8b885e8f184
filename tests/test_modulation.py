import numpy as np
import pytest

from ssbswpc.errors import ShapeError
from ssbswpc.modulation import analytic_signal, modulation_carrier, ssb_modulate


def test_analytic_signal_keeps_real_part():
    rng = np.random.RandomState(0)
    x = rng.randn(200, 3)
    z = analytic_signal(x)
    assert np.iscomplexobj(z)
    assert np.allclose(z.real, x)


def test_carrier_samples():
    carrier = modulation_carrier(4, 0.5, 0.25)
    t = np.array([0.0, 0.5, 1.0, 1.5])
    assert np.allclose(carrier, np.exp(1j * 2 * np.pi * 0.25 * t))
    assert np.allclose(np.abs(carrier), 1.0)


def test_ssb_shifts_a_cosine_up_by_the_carrier():
    n = 256
    t = np.arange(n)
    f0 = 16 / n
    fm = 24 / n
    x = np.cos(2 * np.pi * f0 * t)[:, np.newaxis]
    y = ssb_modulate(x, 1.0, fm)
    assert np.allclose(y[:, 0], np.cos(2 * np.pi * (f0 + fm) * t), atol=1e-10)


def test_zero_frequency_returns_input():
    rng = np.random.RandomState(1)
    x = rng.randn(100, 4)
    assert np.allclose(ssb_modulate(x, 2.0, 0.0), x)


def test_output_is_real_with_same_shape():
    rng = np.random.RandomState(2)
    x = rng.randn(128, 5)
    y = ssb_modulate(x, 1.0, 0.1)
    assert y.shape == x.shape
    assert np.isrealobj(y)


def test_modulation_is_linear_per_channel():
    rng = np.random.RandomState(3)
    a = rng.randn(150)
    y = ssb_modulate(np.column_stack([a, -3 * a]), 1.0, 0.1)
    assert np.allclose(y[:, 1], -3 * y[:, 0])


def test_one_dimensional_input_rejected():
    with pytest.raises(ShapeError):
        ssb_modulate(np.arange(10.0), 1.0, 0.1)
