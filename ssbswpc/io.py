"""Utility helpers for reading inputs and saving SSB + SWPC outputs.

Results are written in both CSV and NumPy formats for easy inspection
and efficient reloading.  Loaders prefer the binary ``.npy`` file and
fall back to the CSV copy.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

from .model import SSBSWPCResult, as_timeseries
from .vectorize import n_pairs

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _ensure_dir(path: Path) -> None:
    """Create directory if it does not already exist."""
    path.mkdir(parents=True, exist_ok=True)


def load_timeseries(path: PathLike, header: bool = True) -> np.ndarray:
    """Load a (T, C) time series from disk.

    ``.npy`` files are loaded directly, ``.csv`` and ``.tsv`` files are
    read with pandas (the first row is treated as column names unless
    ``header`` is False) and any other extension is read as whitespace
    separated text.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Time series file not found: {path}")
    suffix = p.suffix.lower()
    if suffix == '.npy':
        data = np.load(p)
    elif suffix in {'.csv', '.tsv'}:
        sep = '\t' if suffix == '.tsv' else ','
        df = pd.read_csv(p, sep=sep, header=0 if header else None)
        data = df.to_numpy(dtype=float)
    else:
        data = np.loadtxt(p, ndmin=2)
    if np.ndim(data) == 1:
        data = np.asarray(data)[:, np.newaxis]
    logger.info("loaded time series of shape %s from %s", np.shape(data), p)
    return as_timeseries(data)


def save_connectivity(connectivity: np.ndarray, output_dir: PathLike) -> None:
    """Save the vectorised connectivity time series.

    Parameters
    ----------
    connectivity : np.ndarray
        Array of shape (n_windows, n_pairs).
    output_dir : str or Path
        Destination directory. It will be created if necessary.
    """
    out = Path(output_dir)
    _ensure_dir(out)
    np.save(out / "connectivity.npy", connectivity)
    np.savetxt(out / "connectivity.csv", np.atleast_2d(connectivity), delimiter=",")


def save_correlation_stack(stack: np.ndarray, output_dir: PathLike) -> None:
    """Persist the full stack of per-window correlation matrices.

    A CSV file with one flattened matrix per row is written alongside
    a binary ``.npy`` file retaining the original shape.
    """
    out = Path(output_dir)
    _ensure_dir(out)
    arr = np.asarray(stack)
    np.save(out / "correlation_stack.npy", arr)
    flat = arr.reshape(arr.shape[0], int(np.prod(arr.shape[1:])))
    np.savetxt(out / "correlation_stack.csv", flat, delimiter=",")


def save_window_centers(centers: np.ndarray, output_dir: PathLike) -> None:
    """Save the window centre indices."""
    out = Path(output_dir)
    _ensure_dir(out)
    fmt = "%d" if np.issubdtype(np.asarray(centers).dtype, np.integer) else "%.1f"
    np.save(out / "window_center_index.npy", centers)
    np.savetxt(out / "window_center_index.csv", centers, fmt=fmt, delimiter=",")


def save_result(result: SSBSWPCResult, output_dir: PathLike) -> Path:
    """Write connectivity, window centres and correlation stack.

    Returns
    -------
    Path
        The output directory.
    """
    out = Path(output_dir)
    save_connectivity(result.connectivity, out)
    save_window_centers(result.window_center_index, out)
    save_correlation_stack(result.correlation_stack, out)
    logger.info("saved %d windows to %s", result.n_windows, out)
    return out


def load_connectivity(input_dir: PathLike) -> np.ndarray:
    """Load a saved connectivity time series from ``input_dir``."""
    inp = Path(input_dir)
    npy = inp / "connectivity.npy"
    csv = inp / "connectivity.csv"
    if npy.exists():
        return np.load(npy)
    if csv.exists():
        return np.loadtxt(csv, delimiter=",", ndmin=2)
    raise FileNotFoundError(f"No connectivity file found in {input_dir}.")


def load_window_centers(input_dir: PathLike) -> np.ndarray:
    """Load saved window centre indices from ``input_dir``."""
    inp = Path(input_dir)
    npy = inp / "window_center_index.npy"
    csv = inp / "window_center_index.csv"
    if npy.exists():
        return np.load(npy)
    if csv.exists():
        data = np.loadtxt(csv, delimiter=",", ndmin=1)
        if np.all(data == np.round(data)):
            return data.astype(int)
        return data
    raise FileNotFoundError(f"No window centre file found in {input_dir}.")


def load_correlation_stack(input_dir: PathLike) -> np.ndarray:
    """Load the correlation stack saved by :func:`save_correlation_stack`.

    The CSV fallback reconstructs square matrices from the flattened
    rows.
    """
    inp = Path(input_dir)
    npy = inp / "correlation_stack.npy"
    csv = inp / "correlation_stack.csv"
    if npy.exists():
        return np.load(npy)
    if csv.exists():
        data = np.loadtxt(csv, delimiter=",", ndmin=2)
        n_windows, n_features = data.shape
        root = int(round(np.sqrt(n_features)))
        if root * root != n_features:
            raise ValueError(f"cannot reshape {n_features} values per row into a square matrix")
        return data.reshape(n_windows, root, root)
    raise FileNotFoundError(f"No correlation stack file found in {input_dir}.")


def infer_n_channels(connectivity: np.ndarray) -> int:
    """Recover the channel count from the width of a connectivity array."""
    width = np.asarray(connectivity).shape[-1]
    n = int(round((1 + np.sqrt(1 + 8 * width)) / 2))
    if n_pairs(n) != width:
        raise ValueError(f"{width} is not a triangular number of channel pairs")
    return n


__all__ = [
    "load_timeseries",
    "save_connectivity",
    "save_correlation_stack",
    "save_window_centers",
    "save_result",
    "load_connectivity",
    "load_window_centers",
    "load_correlation_stack",
    "infer_n_channels",
]
