"""Construction and application of the rotations of a rank-1 Cholesky downdate.

Reference:
    LINPACK `DCHDD` (G. W. Stewart, 1978), without the (z, y, rho) part.
"""

import jax.numpy as jnp
from jax import vmap
from jax.lax import scan

from choldownlib.types import Array, ArrayLike, ScalarArray, ScalarArrayLike


def build_rotations(
    s: ArrayLike, rho: ScalarArrayLike
) -> tuple[Array, Array, ScalarArray]:
    r"""Builds the plane rotations that remove $x$ from $R$.

    Starting from $\alpha = \sqrt{1 - \rho^2}$ the rotations are generated from
    the last index to the first, each one folding $s_i$ into $\alpha$.

    Args:
        s: Solution of $R^{\top} s = x$, shape (n,).
        rho: $\|s\|_2$, must be strictly less than 1.

    Returns:
        Cosines `c`, sines `s` (both shape (n,)) and the final $\alpha$, which
        equals 1 up to rounding.
    """
    s = jnp.asarray(s)
    alpha = jnp.sqrt(1.0 - jnp.square(jnp.asarray(rho, dtype=s.dtype)))

    def body(alpha, s_i):
        scale = alpha + jnp.abs(s_i)
        a = alpha / scale
        b = s_i / scale
        norm = jnp.hypot(a, b)
        return scale * norm, (a / norm, b / norm)

    alpha, (c, sines) = scan(body, alpha, s, reverse=True)
    return c, sines, alpha


def apply_rotations(R: ArrayLike, c: ArrayLike, s: ArrayLike) -> Array:
    """Applies the downdate rotations to an upper triangular factor.

    Within column `j` the rotations run from row `j` up to row 0, carrying the
    rotated-out component along. Columns do not interact and are mapped.
    Entries strictly below the diagonal are returned unchanged.

    Args:
        R: Upper triangular factor, shape (n, n).
        c: Cosines from `build_rotations`.
        s: Sines from `build_rotations`.

    Returns:
        The downdated factor, shape (n, n).
    """
    R, c, s = jnp.asarray(R), jnp.asarray(c), jnp.asarray(s)
    rows = jnp.arange(R.shape[0])

    def rotate_column(column, j):
        def body(xx, inputs):
            r_ij, c_i, s_i, i = inputs
            on_or_above_diag = i <= j
            t = xx * c_i + r_ij * s_i
            r_ij_new = r_ij * c_i - xx * s_i
            return (
                jnp.where(on_or_above_diag, t, xx),
                jnp.where(on_or_above_diag, r_ij_new, r_ij),
            )

        _, column = scan(
            body, jnp.zeros((), dtype=R.dtype), (column, c, s, rows), reverse=True
        )
        return column

    return vmap(rotate_column, in_axes=(1, 0), out_axes=1)(R, rows)
