from importlib.metadata import version

__version__ = version("choldownlib")
del version

from choldownlib import downdate, linalg, types
from choldownlib.downdate import (
    DowndateError,
    DowndateResult,
    DowndateStatus,
    NotPositiveDefiniteError,
    SingularFactorError,
    cholesky_downdate,
    cholesky_downdate_column_major,
    cholesky_downdate_lower,
    raise_for_status,
)
from choldownlib.linalg import euclidean_norm, solve_upper_transposed
