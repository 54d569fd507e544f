from choldownlib.downdate.downdate import (
    DowndateResult,
    cholesky_downdate,
    cholesky_downdate_column_major,
    cholesky_downdate_lower,
)
from choldownlib.downdate.rotations import apply_rotations, build_rotations
from choldownlib.downdate.status import (
    DowndateError,
    DowndateStatus,
    NotPositiveDefiniteError,
    SingularFactorError,
    raise_for_status,
)
