from choldownlib.linalg.dot import dot_product
from choldownlib.linalg.layout import (
    column_major_index,
    from_column_major,
    to_column_major,
)
from choldownlib.linalg.norm import euclidean_norm
from choldownlib.linalg.triangular import solve_upper_transposed
