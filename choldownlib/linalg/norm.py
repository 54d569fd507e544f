"""Euclidean norm with a scaled sum of squares."""

import jax.numpy as jnp
from jax.lax import scan

from choldownlib.types import Array, ArrayLike, ScalarArray


def euclidean_norm(x: ArrayLike) -> ScalarArray:
    """Computes the Euclidean norm of a vector without overflow or underflow.

    Keeps a running `scale` (largest magnitude seen so far) and a sum of
    squares `ssq` normalised by that scale, so that no element is ever squared
    directly. Zero entries are skipped.

    Args:
        x: A 1-D array.

    Returns:
        `scale * sqrt(ssq)`, i.e. ||x||_2. An empty input gives 0.0.

    Reference:
        LAPACK `DNRM2` with `DLASSQ` inlined.
    """
    x = jnp.asarray(x)
    if x.ndim != 1:
        raise ValueError(f"euclidean_norm expects a 1-D array, got {x.ndim}D")

    dtype = jnp.result_type(x, 0.0)
    x = x.astype(dtype)

    if x.shape[0] < 1:
        return jnp.zeros((), dtype=dtype)

    def body(carry: tuple[Array, Array], x_i: Array):
        scale, ssq = carry
        abs_x_i = jnp.abs(x_i)
        nonzero = x_i != 0.0
        grow = nonzero & (scale < abs_x_i)

        # Placeholders keep the unselected branch free of 0/0
        safe_abs = jnp.where(nonzero, abs_x_i, 1.0)
        safe_scale = jnp.where(scale == 0.0, 1.0, scale)

        ssq_grow = 1.0 + ssq * jnp.square(scale / safe_abs)
        ssq_keep = ssq + jnp.square(abs_x_i / safe_scale)
        ssq = jnp.where(grow, ssq_grow, jnp.where(nonzero, ssq_keep, ssq))
        scale = jnp.where(grow, abs_x_i, scale)
        return (scale, ssq), None

    init = (jnp.zeros((), dtype=dtype), jnp.ones((), dtype=dtype))
    (scale, ssq), _ = scan(body, init, x)
    return scale * jnp.sqrt(ssq)
