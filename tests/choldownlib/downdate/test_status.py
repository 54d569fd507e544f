import jax.numpy as jnp
import pytest

from choldownlib import cholesky_downdate
from choldownlib.downdate.status import (
    DowndateError,
    DowndateStatus,
    NotPositiveDefiniteError,
    SingularFactorError,
    raise_for_status,
)


def test_status_codes():
    assert DowndateStatus.SUCCESS == 0
    assert DowndateStatus.NOT_POSITIVE_DEFINITE == -1
    assert DowndateStatus.SINGULAR_FACTOR == -2


def test_raise_for_status_success():
    raise_for_status(0)
    raise_for_status(jnp.asarray(0, dtype=jnp.int32))


@pytest.mark.parametrize(
    "status, error",
    [
        (DowndateStatus.NOT_POSITIVE_DEFINITE, NotPositiveDefiniteError),
        (DowndateStatus.SINGULAR_FACTOR, SingularFactorError),
    ],
)
def test_raise_for_status_failures(status, error):
    with pytest.raises(error):
        raise_for_status(jnp.asarray(status.value, dtype=jnp.int32))
    assert issubclass(error, DowndateError)
    assert issubclass(error, ValueError)


def test_raise_for_status_unknown():
    with pytest.raises(ValueError, match="Unknown"):
        raise_for_status(7)


def test_raise_for_status_from_downdate():
    _, status = cholesky_downdate(jnp.array([[1.0]]), jnp.array([1.0]))
    with pytest.raises(NotPositiveDefiniteError):
        raise_for_status(status)

    _, status = cholesky_downdate(
        jnp.array([[0.0, 1.0], [0.0, 1.0]]), jnp.array([0.5, 0.5])
    )
    with pytest.raises(SingularFactorError):
        raise_for_status(status)


def test_raise_for_status_rejects_batched_status():
    status = jnp.array([0, -1, 0], dtype=jnp.int32)
    with pytest.raises(ValueError, match="scalar"):
        raise_for_status(status)
