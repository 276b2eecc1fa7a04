"""
Numerical precision constants.

Provides the default scalar representation and the set of accepted
floating dtypes used across matrices and vectors.
"""

import numpy as np


# Scalar representation used when none is requested
DEFAULT_DTYPE: type[np.floating] = np.float64

# Floating dtypes accepted as matrix scalars
SUPPORTED_DTYPES: frozenset[np.dtype] = frozenset({
    np.dtype(np.float16),
    np.dtype(np.float32),
    np.dtype(np.float64),
    np.dtype(np.longdouble),
})
