#!/usr/bin/env python3

import numpy as np

from gpindel.constant import MAX_QUALITY

__all__ = [
    "error_of_qual",
    "qual_of_error",
]


def error_of_qual(qual):
    """Convert phred-scaled quality integer into a probability of the call being an error.

    Paramters
    ---------
    qual : array_like
        A single int or array of integers.

    Returns
    -------
    error : array_like
        A single float or array of floats.
    """
    return 10 ** (np.asarray(qual) / -10)


def qual_of_error(error, max_quality=MAX_QUALITY):
    """Convert a probability of a call being an error into a phred-scaled quality integer.

    Paramters
    ---------
    error : array_like
        A single float or array of floats.
    max_quality : int
        Quality assigned to error rates too small to be represented.

    Returns
    -------
    qual : array_like
        A single int or array of integers.
    """
    error = np.asarray(error, dtype=float)
    if np.any(error < 0) or np.any(error > 1):
        raise ValueError("Error probabilities must be within [0, 1]")
    # an error rate of 0 has no finite qual
    minimum = 10 ** (max_quality / -10)
    error = np.maximum(error, minimum)
    return np.round(-10 * np.log10(error)).astype(int)
