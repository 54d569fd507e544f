import jax.numpy as jnp
from jax import Array, random
from jax.scipy.linalg import solve_triangular

from choldownlib.types import ArrayLike


def generate_cholesky_factor(key: Array, dim: int) -> Array:
    """Upper triangular factor of a well conditioned random SPD matrix."""
    M = random.normal(key, (dim, dim), dtype=jnp.float64)
    A = M @ M.T + dim * jnp.eye(dim)
    return jnp.linalg.cholesky(A).T


def generate_downdate_vector(key: Array, R: ArrayLike, target_norm: float) -> Array:
    """Random x scaled so that the solution of R^T s = x has norm `target_norm`."""
    R = jnp.asarray(R)
    x = random.normal(key, (R.shape[0],), dtype=jnp.float64)
    s = solve_triangular(R, x, trans="T", lower=False)
    return x * target_norm / jnp.linalg.norm(s)
