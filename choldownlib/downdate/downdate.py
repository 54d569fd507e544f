"""Rank-1 downdate of a Cholesky factor."""

import warnings
from functools import partial
from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax.lax import cond

from choldownlib.downdate.rotations import apply_rotations, build_rotations
from choldownlib.downdate.status import DowndateStatus
from choldownlib.linalg import (
    euclidean_norm,
    from_column_major,
    solve_upper_transposed,
    to_column_major,
)
from choldownlib.types import Array, ArrayLike, StatusArray


class DowndateResult(NamedTuple):
    """Outcome of a Cholesky downdate.

    Attributes:
        chol: The downdated factor if `status` is `DowndateStatus.SUCCESS`,
            otherwise the input factor unchanged.
        status: int32 scalar array holding a `DowndateStatus` code.
    """

    chol: Array
    status: StatusArray


def _check_inputs(R: ArrayLike, x: ArrayLike) -> tuple[Array, Array]:
    R, x = jnp.asarray(R), jnp.asarray(x)

    if R.ndim != 2 or R.shape[0] != R.shape[1]:
        raise ValueError(f"Cholesky factor must be a square matrix, got {R.shape}")
    n = R.shape[0]
    if n < 1:
        raise ValueError("Cholesky factor must be at least 1 x 1")
    if x.shape != (n,):
        raise ValueError(
            f"Downdate vector must have shape ({n},) to match the factor, got {x.shape}"
        )

    # Weakly typed 0.0 promotes integers without widening float32
    dtype = jnp.result_type(R, x, 0.0)
    if jnp.issubdtype(dtype, jnp.complexfloating):
        raise ValueError(f"Complex Cholesky downdates are not supported, got {dtype}")
    if jnp.finfo(dtype).bits < 64:
        warnings.warn(
            f"Cholesky downdate running in {dtype}, the positive definiteness "
            "check is unreliable near the boundary. Enable double precision with "
            'jax.config.update("jax_enable_x64", True).'
        )

    return R.astype(dtype), x.astype(dtype)


@jax.jit
def _downdate(R: Array, x: Array) -> DowndateResult:
    s = solve_upper_transposed(R, x)
    rho = euclidean_norm(s)

    singular = jnp.any(jnp.diag(R) == 0.0)
    # NaN rho (non-finite input) is treated as infeasible
    feasible = rho < 1.0
    status = jnp.where(
        singular,
        DowndateStatus.SINGULAR_FACTOR.value,
        jnp.where(
            feasible,
            DowndateStatus.SUCCESS.value,
            DowndateStatus.NOT_POSITIVE_DEFINITE.value,
        ),
    ).astype(jnp.int32)

    def _rotate(R):
        c, sines, _ = build_rotations(s, rho)
        return apply_rotations(R, c, sines)

    chol = cond(status == DowndateStatus.SUCCESS.value, _rotate, lambda R: R, R)
    return DowndateResult(chol, status)


def cholesky_downdate(R: ArrayLike, x: ArrayLike) -> DowndateResult:
    r"""Rank-1 downdate of an upper triangular Cholesky factor.

    Given $A = R^{\top} R$ computes the upper triangular $R'$ with
    $R'^{\top} R' = A - x x^{\top}$. The downdate exists iff
    $\|s\|_2 < 1$ where $R^{\top} s = x$ (equivalently $x^{\top} A^{-1} x < 1$).

    Only entries on or above the diagonal of `R` are read and rewritten, the
    strictly lower part is returned as given. The function is pure: the caller
    rebinds its factor to `result.chol`.

    Args:
        R: Upper triangular Cholesky factor of shape (n, n) with positive diagonal.
        x: Downdate vector of shape (n,).

    Returns:
        `DowndateResult(chol, status)`. On `DowndateStatus.SUCCESS`, `chol` is
        $R'$. Otherwise `chol` is `R` unchanged and `status` is
        `NOT_POSITIVE_DEFINITE` or `SINGULAR_FACTOR` (zero diagonal entry).
        Use `raise_for_status` to turn a failed status into an exception.

    Raises:
        ValueError: If the shapes are inconsistent, n < 1 or the dtype is complex.

    References:
        LINPACK `DCHDD`. J. J. Dongarra, C. B. Moler, J. R. Bunch, G. W. Stewart,
        LINPACK Users' Guide, SIAM, 1979, chapter 10.
    """
    R, x = _check_inputs(R, x)
    return _downdate(R, x)


def cholesky_downdate_lower(L: ArrayLike, x: ArrayLike) -> DowndateResult:
    r"""Rank-1 downdate of a lower triangular Cholesky factor.

    Same as `cholesky_downdate` for the $L L^{\top}$ convention: returns $L'$
    with $L' L'^{\top} = L L^{\top} - x x^{\top}$.

    Args:
        L: Lower triangular Cholesky factor of shape (n, n) with positive diagonal.
        x: Downdate vector of shape (n,).

    Returns:
        `DowndateResult` with a lower triangular `chol`.
    """
    chol, status = cholesky_downdate(jnp.asarray(L).T, x)
    return DowndateResult(chol.T, status)


@partial(jax.jit, static_argnames=("n",))
def cholesky_downdate_column_major(
    n: int, R: ArrayLike, x: ArrayLike
) -> DowndateResult:
    """Rank-1 downdate of an upper triangular factor stored column-major.

    Element (i, j) of the factor is read from and written to offset `j * n + i`
    of the flat buffer, see `choldownlib.linalg.layout`.

    Args:
        n: Order of the factor. Must be a Python int so that the function can be
            JIT-compiled.
        R: Flat column-major buffer of length n * n.
        x: Downdate vector of shape (n,).

    Returns:
        `DowndateResult` whose `chol` is again a flat column-major buffer.
    """
    chol, status = cholesky_downdate(from_column_major(R, n), x)
    return DowndateResult(to_column_major(chol), status)
