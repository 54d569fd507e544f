from typing import TypeAlias

from jax import Array
from jax.typing import ArrayLike

ScalarArray: TypeAlias = (
    Array  # jax.Array with just a single float element, i.e. shape ()
)
ScalarArrayLike: TypeAlias = ArrayLike  # Object that will be cast to a ScalarArray
StatusArray: TypeAlias = Array  # int32 jax.Array of shape () holding a DowndateStatus
