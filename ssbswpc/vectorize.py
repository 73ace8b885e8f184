"""
ssbswpc.vectorize
=================

Compact storage of symmetric connectivity matrices.  Only the strictly
lower triangle of each matrix is kept, scanned column by column (left
to right) and, within a column, from the row below the diagonal
downwards.  The flat index set depends only on the matrix dimension and
is cached so that a stack of matrices is vectorised with one gather.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import numpy as np

from .errors import ShapeError


def n_pairs(n: int) -> int:
    """Number of strictly lower triangular entries of an ``n x n`` matrix."""
    return n * (n - 1) // 2


@lru_cache(maxsize=None)
def lower_triangle_indices(n: int) -> np.ndarray:
    """Flat (row-major) indices of the strictly lower triangle.

    The returned array is read-only because it is shared between
    callers.
    """
    # upper triangle in row order == lower triangle in column order
    cols, rows = np.triu_indices(n, k=1)
    idx = rows * n + cols
    idx.setflags(write=False)
    return idx


def mat2vec(mat: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Return the strictly lower triangle of a matrix or matrix stack.

    Parameters
    ----------
    mat : np.ndarray
        Square matrix of shape (m, m) or stack of shape (n, m, m).

    Returns
    -------
    vec : np.ndarray
        Shape ``(m*(m-1)/2,)`` for a single matrix or
        ``(n, m*(m-1)/2)`` for a stack.
    index : np.ndarray
        The flat index set used, see :func:`lower_triangle_indices`.

    Raises
    ------
    ShapeError
        If the matrix is not square, the last two dimensions of a stack
        differ or the input is neither 2D nor 3D.
    """
    arr = np.asarray(mat)
    if arr.ndim == 2:
        n, m = arr.shape
        if n != m:
            raise ShapeError(f"matrix must be square, got shape {arr.shape}")
        idx = lower_triangle_indices(m)
        return arr.reshape(-1)[idx], idx
    if arr.ndim == 3:
        n, m, m2 = arr.shape
        if m != m2:
            raise ShapeError(f"2nd and 3rd dimensions must be equal, got shape {arr.shape}")
        idx = lower_triangle_indices(m)
        return arr.reshape(n, m * m2)[:, idx], idx
    raise ShapeError(f"expected a 2D matrix or 3D stack, got {arr.ndim} dimension(s)")


def vec2mat(vec: np.ndarray, n: int, diagonal: float = 1.0) -> np.ndarray:
    """Re-inflate lower triangular vectors into symmetric matrices.

    Parameters
    ----------
    vec : np.ndarray
        Shape ``(n*(n-1)/2,)`` or ``(k, n*(n-1)/2)``.
    n : int
        Matrix dimension.
    diagonal : float, optional
        Value written on the main diagonal.  Defaults to 1.

    Returns
    -------
    np.ndarray
        Shape ``(n, n)`` or ``(k, n, n)``.
    """
    arr = np.asarray(vec)
    single = arr.ndim == 1
    if single:
        arr = arr[np.newaxis, :]
    if arr.ndim != 2 or arr.shape[1] != n_pairs(n):
        raise ShapeError(
            f"expected vectors of length {n_pairs(n)} for n={n}, got shape {np.shape(vec)}"
        )
    k = arr.shape[0]
    out = np.zeros((k, n * n), dtype=np.result_type(arr.dtype, float))
    idx = lower_triangle_indices(n)
    out[:, idx] = arr
    out = out.reshape(k, n, n)
    out = out + np.swapaxes(out, 1, 2)
    diag = np.arange(n)
    out[:, diag, diag] = diagonal
    return out[0] if single else out


__all__ = [
    'n_pairs',
    'lower_triangle_indices',
    'mat2vec',
    'vec2mat',
]
