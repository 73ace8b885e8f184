import logging

import pytest

from ssbswpc.config import SSBConfig, WindowType
from ssbswpc.errors import ConfigurationError


def test_window_type_aliases():
    assert WindowType.parse('rect') is WindowType.RECTANGULAR
    assert WindowType.parse('Gauss') is WindowType.GAUSSIAN
    assert WindowType.parse('tukey') is WindowType.TAPERED_COSINE
    assert WindowType.parse('tapered-cosine') is WindowType.TAPERED_COSINE
    assert WindowType.parse(WindowType.GAUSSIAN) is WindowType.GAUSSIAN


def test_unknown_window_type_fails_on_construction():
    with pytest.raises(ConfigurationError) as excinfo:
        SSBConfig(window_size=15, sampling_interval=1.0, modulation_freq=0.1, window_type='hann')
    assert 'hann' in str(excinfo.value)
    # callers catching ValueError still see it
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(window_size=0),
        dict(window_size=15.0),
        dict(sampling_interval=0.0),
        dict(sampling_interval=-2.0),
        dict(modulation_freq=float('nan')),
        dict(enable_diagnostics=1),
        dict(chunk_size=0),
    ],
)
def test_invalid_fields_raise(kwargs):
    params = dict(window_size=15, sampling_interval=1.0, modulation_freq=0.1)
    params.update(kwargs)
    cfg = SSBConfig(**params)
    with pytest.raises(ConfigurationError):
        cfg.validate(100)


def test_even_window_warns(caplog):
    cfg = SSBConfig(window_size=10, sampling_interval=1.0, modulation_freq=0.1)
    with caplog.at_level(logging.WARNING):
        cfg.validate(100)
    assert any('even' in rec.getMessage() for rec in caplog.records)


def test_out_of_range_frequency_warns_by_default(caplog):
    cfg = SSBConfig(window_size=15, sampling_interval=2.0, modulation_freq=0.3)
    with caplog.at_level(logging.WARNING):
        cfg.validate(100)
    assert any('outside' in rec.getMessage() for rec in caplog.records)


def test_out_of_range_frequency_raises_when_strict():
    cfg = SSBConfig(window_size=15, sampling_interval=1.0, modulation_freq=-0.1, strict_frequency=True)
    with pytest.raises(ConfigurationError):
        cfg.validate(100)


def test_valid_config_is_silent(caplog):
    cfg = SSBConfig(window_size=15, sampling_interval=1.0, modulation_freq=0.1)
    with caplog.at_level(logging.WARNING):
        cfg.validate(100)
    assert caplog.records == []
    assert cfg.nyquist == 0.5
    assert cfg.sampling_rate == 1.0
