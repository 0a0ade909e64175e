"""Configuration constants."""

from typing import Union

import numpy as np


DType = Union[str, np.dtype, type]
DEFAULT_DTYPE: DType = np.float64

# Largest finite double. Seeds the "previous pass" objective so the first pass boundary never converges.
MAX_OBJECTIVE: float = float(np.finfo(np.float64).max)
