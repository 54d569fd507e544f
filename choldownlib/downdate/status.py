"""Outcome codes of a Cholesky downdate and their exception counterparts."""

from enum import IntEnum

import jax.numpy as jnp

from choldownlib.types import ArrayLike


class DowndateStatus(IntEnum):
    """Return codes stored in `DowndateResult.status`.

    `NOT_POSITIVE_DEFINITE` is a legitimate outcome: `A - x x^T` has no Cholesky
    factor. `SINGULAR_FACTOR` means the input factor had a zero on its
    diagonal and was never a valid Cholesky factor in the first place.
    """

    SUCCESS = 0
    NOT_POSITIVE_DEFINITE = -1
    SINGULAR_FACTOR = -2


class DowndateError(ValueError):
    """Base class for failed downdates surfaced by `raise_for_status`."""


class NotPositiveDefiniteError(DowndateError):
    pass


class SingularFactorError(DowndateError):
    pass


def raise_for_status(status: ArrayLike) -> None:
    """Raises the exception matching a concrete downdate status.

    Statuses are returned rather than raised so that the downdate stays
    traceable; this is the eager counterpart for callers that prefer
    exceptions. It cannot be used on traced values.

    Args:
        status: Status returned by one of the downdate functions. Must be a
            scalar; check batched statuses element by element.

    Raises:
        NotPositiveDefiniteError: If the downdated matrix is not positive definite.
        SingularFactorError: If the input factor has a zero diagonal entry.
        ValueError: If `status` is not a scalar or not a known downdate status.
    """
    status = jnp.asarray(status)
    if status.shape:
        raise ValueError(
            f"raise_for_status expects a scalar status, got shape {status.shape}"
        )
    code = int(status)
    if code == DowndateStatus.SUCCESS:
        return
    if code == DowndateStatus.NOT_POSITIVE_DEFINITE:
        raise NotPositiveDefiniteError(
            "Downdated matrix is not positive definite (||R^-T x|| >= 1)"
        )
    if code == DowndateStatus.SINGULAR_FACTOR:
        raise SingularFactorError("Cholesky factor has a zero diagonal entry")
    raise ValueError(f"Unknown downdate status: {code}")
