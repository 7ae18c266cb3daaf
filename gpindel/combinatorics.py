#!/usr/bin/env python3

from scipy.special import comb

__all__ = [
    "count_configurations",
]


def count_configurations(n_alleles, copy_number):
    """Calculates number of possible allele-count configurations
    at a locus given the number of alleles and the total number
    of chromosome copies.

    Parameters
    ----------
    n_alleles : int
        Number of candidate alleles.
    copy_number : int
        Total number of chromosome copies (2N).

    Returns
    -------
    n_configurations : int
        Number of vectors of non-negative allele counts that
        sum to the copy number.

    """
    return int(comb(n_alleles, copy_number, repetition=True))
