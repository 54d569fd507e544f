import jax.numpy as jnp

from choldownlib.types import Array, ArrayLike


def dot_product(x: ArrayLike, y: ArrayLike, size: int | Array) -> Array:
    """Dot product of the leading `size` entries of two vectors.

    Args:
        x: First vector.
        y: Second vector, same length as `x`.
        size: Number of leading entries to include. May be a traced integer
            (e.g. a loop index), entries at or beyond `size` are masked out.

    Returns:
        Scalar sum of `x[k] * y[k]` over `k < size`.
    """
    x, y = jnp.asarray(x), jnp.asarray(y)
    mask = jnp.arange(x.shape[0]) < size
    return jnp.sum(jnp.where(mask, x * y, 0.0))
