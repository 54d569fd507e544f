"""Forward substitution against the transpose of an upper triangular factor."""

import jax.numpy as jnp
from jax.lax import fori_loop

from choldownlib.linalg.dot import dot_product
from choldownlib.types import Array, ArrayLike


def solve_upper_transposed(R: ArrayLike, x: ArrayLike) -> Array:
    r"""Solves $R^{\top} s = x$ for upper triangular $R$.

    Column $j$ of $R$ above the diagonal is the $j$-th row of the implicit lower
    triangular system, so each $s_j$ needs all of $s_0, \dots, s_{j-1}$ and the
    columns are processed in increasing order. Entries of $R$ strictly below
    the diagonal are never read.

    A zero on the diagonal of $R$ yields non-finite entries in $s$; callers
    that need a diagnosis check the diagonal first (see `cholesky_downdate`).

    Args:
        R: Upper triangular matrix of shape (n, n).
        x: Right hand side of shape (n,).

    Returns:
        The solution $s$ of shape (n,).
    """
    dtype = jnp.result_type(R, x, 0.0)
    R, x = jnp.asarray(R, dtype=dtype), jnp.asarray(x, dtype=dtype)
    n = x.shape[0]

    def body(j, s):
        s_j = (x[j] - dot_product(R[:, j], s, j)) / R[j, j]
        return s.at[j].set(s_j)

    return fori_loop(0, n, body, jnp.zeros_like(x))
