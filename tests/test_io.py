"""Tests for result persistence helpers."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from ssbswpc import SSBConfig, SSBSWPCEstimator
from ssbswpc.io import (
    infer_n_channels,
    load_connectivity,
    load_correlation_stack,
    load_timeseries,
    load_window_centers,
    save_result,
)


def _result(window_size: int = 9):
    rng = np.random.RandomState(0)
    cfg = SSBConfig(window_size=window_size, sampling_interval=1.0, modulation_freq=0.2)
    return SSBSWPCEstimator(cfg).estimate(rng.randn(40, 4))


def test_result_roundtrip(tmp_path: Path) -> None:
    result = _result()
    save_result(result, tmp_path)
    assert np.array_equal(load_connectivity(tmp_path), result.connectivity)
    assert np.array_equal(load_window_centers(tmp_path), result.window_center_index)
    assert np.array_equal(load_correlation_stack(tmp_path), result.correlation_stack)


def test_csv_fallback(tmp_path: Path) -> None:
    result = _result()
    save_result(result, tmp_path)
    for name in ("connectivity.npy", "window_center_index.npy", "correlation_stack.npy"):
        (tmp_path / name).unlink()
    assert np.allclose(load_connectivity(tmp_path), result.connectivity)
    centers = load_window_centers(tmp_path)
    assert np.issubdtype(centers.dtype, np.integer)
    assert np.array_equal(centers, result.window_center_index)
    assert np.allclose(load_correlation_stack(tmp_path), result.correlation_stack)


def test_even_window_centers_survive_csv(tmp_path: Path) -> None:
    result = _result(window_size=8)
    save_result(result, tmp_path)
    (tmp_path / "window_center_index.npy").unlink()
    assert np.allclose(load_window_centers(tmp_path), result.window_center_index)


def test_missing_files_raise(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_connectivity(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_correlation_stack(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_timeseries(tmp_path / "missing.csv")


def test_load_timeseries_formats(tmp_path: Path) -> None:
    data = np.arange(12.0).reshape(6, 2)
    pd.DataFrame(data, columns=["a", "b"]).to_csv(tmp_path / "ts.csv", index=False)
    np.save(tmp_path / "ts.npy", data)
    np.savetxt(tmp_path / "ts.txt", data)
    np.savetxt(tmp_path / "single.txt", data[:, 0])
    assert np.array_equal(load_timeseries(tmp_path / "ts.csv"), data)
    assert np.array_equal(load_timeseries(tmp_path / "ts.npy"), data)
    assert np.array_equal(load_timeseries(tmp_path / "ts.txt"), data)
    assert load_timeseries(tmp_path / "single.txt").shape == (6, 1)


def test_infer_n_channels() -> None:
    assert infer_n_channels(np.zeros((3, 45))) == 10
    assert infer_n_channels(np.zeros(1)) == 2
    with pytest.raises(ValueError):
        infer_n_channels(np.zeros((3, 4)))
