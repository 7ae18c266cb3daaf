#!/usr/bin/env python3

import numpy as np
from dataclasses import dataclass

from gpindel.jitutils import sum_log10_probs
from gpindel.util import error_of_qual, qual_of_error

__all__ = ["ErrorModel"]


@dataclass(eq=False)
class ErrorModel:
    """Site error model of a single sequencing lane.

    Attributes
    ----------
    min_quality : int
        Smallest significant phred-scaled quality score at the site.
    quality_log10_probs : ndarray, float, shape (n_quality, )
        Log10 probability of each quality score from `min_quality`
        to `max_quality` (inclusive). Values are normalised on
        construction.

    Notes
    -----
    The error probability at quality q is the phred probability 10^(-q/10).
    """

    min_quality: int
    quality_log10_probs: np.ndarray

    def __post_init__(self):
        probs = np.asarray(self.quality_log10_probs, dtype=np.float64)
        if probs.ndim != 1 or len(probs) == 0:
            raise ValueError("Error model requires a non-empty quality range")
        if self.min_quality < 0:
            raise ValueError("Quality scores must be non-negative")
        total = sum_log10_probs(probs)
        if total == -np.inf:
            raise ValueError("Error model quality probabilities sum to zero")
        self.min_quality = int(self.min_quality)
        self.quality_log10_probs = probs - total

    @property
    def max_quality(self):
        return self.min_quality + len(self.quality_log10_probs) - 1

    @property
    def qualities(self):
        return np.arange(self.min_quality, self.max_quality + 1)

    @property
    def error_rates(self):
        """Error probability of each quality score in the significant range."""
        return error_of_qual(self.qualities)

    def log10_probabilities(self, min_quality=None, max_quality=None):
        """Log10 probabilities of quality scores within an inclusive range.

        Quality scores outside of the models range have a probability of 0.
        """
        if min_quality is None:
            min_quality = self.min_quality
        if max_quality is None:
            max_quality = self.max_quality
        out = np.full(max_quality - min_quality + 1, -np.inf)
        lo = max(min_quality, self.min_quality)
        hi = min(max_quality, self.max_quality)
        if lo <= hi:
            out[lo - min_quality : hi - min_quality + 1] = self.quality_log10_probs[
                lo - self.min_quality : hi - self.min_quality + 1
            ]
        return out

    @classmethod
    def from_quality_counts(cls, counts, min_quality=0):
        """Error model from the number of observations of each quality score.

        Parameters
        ----------
        counts : array_like, int, shape (n_quality, )
            Number of observations of each quality score starting
            at `min_quality`.
        min_quality : int
            Quality score of the first count.

        Notes
        -----
        Leading and trailing quality scores without observations are
        excluded from the significant range.
        """
        counts = np.asarray(counts, dtype=np.float64)
        if np.any(counts < 0):
            raise ValueError("Quality counts must be non-negative")
        (observed,) = np.nonzero(counts)
        if len(observed) == 0:
            raise ValueError("Error model requires at least one observed quality")
        first, last = observed[0], observed[-1]
        counts = counts[first : last + 1]
        with np.errstate(divide="ignore"):
            log10_probs = np.log10(counts / counts.sum())
        return cls(min_quality=min_quality + int(first), quality_log10_probs=log10_probs)

    @classmethod
    def point_mass(cls, quality):
        """Error model in which every base has the same quality score."""
        return cls(min_quality=quality, quality_log10_probs=np.zeros(1))

    @classmethod
    def from_error_rate(cls, error_rate):
        """Error model in which every base has the same error rate
        (rounded to the nearest phred-scaled quality score).
        """
        return cls.point_mass(int(qual_of_error(error_rate)))
