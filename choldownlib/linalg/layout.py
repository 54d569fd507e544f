"""Column-major storage of square matrices.

Flat buffers handed over by column-major callers store element (i, j) of an
n x n matrix at offset `j * n + i`. These helpers are the only place that
convention is spelled out, everything else works on (n, n) arrays.
"""

import jax.numpy as jnp

from choldownlib.types import Array, ArrayLike


def column_major_index(i: int, j: int, n: int) -> int:
    """Offset of element (i, j) in the column-major buffer of an n x n matrix."""
    return j * n + i


def from_column_major(buffer: ArrayLike, n: int) -> Array:
    """Views a flat column-major buffer of length n * n as an (n, n) matrix."""
    if n < 1:
        raise ValueError(f"Column-major factor must be at least 1 x 1, got n={n}")
    buffer = jnp.asarray(buffer)
    if buffer.shape != (n * n,):
        raise ValueError(
            f"Column-major buffer for n={n} must have shape ({n * n},), "
            f"got {buffer.shape}"
        )
    # Row-major reshape of column-major data gives the transpose
    return buffer.reshape(n, n).T


def to_column_major(matrix: ArrayLike) -> Array:
    """Flattens an (n, n) matrix into a column-major buffer."""
    matrix = jnp.asarray(matrix)
    return matrix.T.reshape(-1)
