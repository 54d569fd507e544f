import jax.numpy as jnp
import numpy as np
import pytest

from choldownlib.linalg.layout import (
    column_major_index,
    from_column_major,
    to_column_major,
)


def test_column_major_index():
    n = 3
    A = np.arange(9.0).reshape(3, 3)
    buffer = A.ravel(order="F")
    for i in range(n):
        for j in range(n):
            assert buffer[column_major_index(i, j, n)] == A[i, j]


def test_from_column_major():
    A = np.arange(12.0, 28.0).reshape(4, 4)
    buffer = A.ravel(order="F")
    assert jnp.array_equal(from_column_major(buffer, 4), A)


def test_to_column_major():
    A = jnp.arange(16.0).reshape(4, 4)
    assert jnp.array_equal(to_column_major(A), np.asarray(A).ravel(order="F"))
    assert jnp.array_equal(from_column_major(to_column_major(A), 4), A)


def test_from_column_major_wrong_length():
    with pytest.raises(ValueError):
        from_column_major(jnp.ones(8), 3)
    with pytest.raises(ValueError):
        from_column_major(jnp.ones((3, 3)), 3)


@pytest.mark.parametrize("n", [0, -1, -3])
def test_from_column_major_non_positive_order(n):
    with pytest.raises(ValueError):
        from_column_major(jnp.ones(n * n), n)
