import numpy as np
import numba

from gpindel.constant import LOG10_CACHE_SIZE


@numba.njit(cache=True)
def sum_log10_probs(array):
    """Sum of values in log10 space.

    Parameters
    ----------
    array : ndarray, float, shape (n_values, )
        Log10-transformed values.

    Returns
    -------
    z : float
        The log10-transformed sum of the un-transformed values.
        An empty array sums to a probability of zero.

    Notes
    -----
    Values are summed relative to the maximum value so that
    the result does not underflow.

    """
    n = len(array)
    if n == 0:
        return -np.inf
    maximum = array[0]
    for i in range(1, n):
        if array[i] > maximum:
            maximum = array[i]
    if maximum == -np.inf:
        return -np.inf
    total = 0.0
    for i in range(n):
        total += 10.0 ** (array[i] - maximum)
    return maximum + np.log10(total)


@numba.njit(cache=True)
def log10_dot_product(x, y):
    """Dot product of two vectors of log10-transformed values.

    Parameters
    ----------
    x, y : ndarray, float, shape (n_values, )
        Log10-transformed values.

    Returns
    -------
    z : float
        The log10-transformed dot product of the un-transformed
        `x` and `y`.

    """
    n = len(x)
    if len(y) != n:
        raise ValueError("Vectors must be of equal length")
    pairs = np.empty(n)
    for i in range(n):
        pairs[i] = x[i] + y[i]
    return sum_log10_probs(pairs)


def _new_log10_cache(size):
    cache = np.empty(size)
    cache[0] = -np.inf
    cache[1:] = np.log10(np.arange(1, size))
    return cache


LOG10_CACHE = _new_log10_cache(LOG10_CACHE_SIZE)


@numba.njit(cache=True)
def log10_of_int(n, cache):
    """Log10 of a non-negative integer with log10(0) = -inf.

    Parameters
    ----------
    n : int
        Non-negative integer.
    cache : ndarray, float
        Table of log10 values indexed by integer.

    Returns
    -------
    value : float
        Log10 of `n`.
    """
    if n < len(cache):
        return cache[n]
    return np.log10(float(n))


@numba.njit(cache=True)
def log10_mismatch_table(copy_number, max_quality):
    """Table of log10 probabilities of observing a base that matches an
    allele given the allele count and a phred-scaled quality score.

    Parameters
    ----------
    copy_number : int
        Total number of chromosome copies (2N).
    max_quality : int
        Largest phred-scaled quality score in the table.

    Returns
    -------
    table : ndarray, float, shape (copy_number + 1, max_quality + 1)
        Values of log10((j / 2N)(1 - e) + (e / 3)((2N - j) / 2N))
        for allele count j and error rate e of each quality score.

    """
    table = np.empty((copy_number + 1, max_quality + 1))
    for q in range(max_quality + 1):
        e = 10.0 ** (q / -10.0)
        for j in range(copy_number + 1):
            p = (j / copy_number) * (1 - e) + (e / 3) * (
                (copy_number - j) / copy_number
            )
            if p > 0.0:
                table[j, q] = np.log10(p)
            else:
                table[j, q] = -np.inf
    return table


@numba.njit(cache=True)
def log10_likelihood_read_matrix(matrix, counts, copy_number, cache):
    """Log10 likelihood of an allele-count configuration given a matrix
    of read-allele log10 likelihoods.

    Parameters
    ----------
    matrix : ndarray, float, shape (n_reads, n_alleles)
        Log10 likelihood of each read given each allele haplotype.
    counts : ndarray, int, shape (n_alleles, )
        Number of chromosome copies carrying each allele.
    copy_number : int
        Total number of chromosome copies (2N).
    cache : ndarray, float
        Table of log10 values indexed by integer.

    Returns
    -------
    llk : float
        Log10 likelihood summed over reads.

    """
    n_reads, n_alleles = matrix.shape
    log10_copy_number = log10_of_int(copy_number, cache)
    terms = np.empty(n_alleles)
    llk = 0.0
    for r in range(n_reads):
        for k in range(n_alleles):
            terms[k] = matrix[r, k] + log10_of_int(counts[k], cache) - log10_copy_number
        llk += sum_log10_probs(terms)
    return llk


@numba.njit(cache=True)
def log10_likelihood_allele_counts(
    observations, counts, table, quality_log10_probs, min_quality
):
    """Log10 likelihood of an allele-count configuration given counts of
    pileup elements matching each allele and a site error model.

    Parameters
    ----------
    observations : ndarray, int, shape (n_alleles, )
        Number of pileup elements matching each allele.
    counts : ndarray, int, shape (n_alleles, )
        Number of chromosome copies carrying each allele.
    table : ndarray, float, shape (copy_number + 1, n_quality)
        Log10 mismatch probabilities indexed by allele count and quality.
    quality_log10_probs : ndarray, float, shape (n_significant, )
        Log10 probability of each quality score in the significant range.
    min_quality : int
        First quality score of the significant range.

    Returns
    -------
    llk : float
        Log10 likelihood integrated over the quality score distribution.

    """
    n_quality = len(quality_log10_probs)
    n_alleles = len(observations)
    accumulate = np.zeros(n_quality)
    for i in range(n_quality):
        q = min_quality + i
        for k in range(n_alleles):
            n = observations[k]
            # skipping zero observations avoids 0 * -inf
            if n > 0:
                accumulate[i] += n * table[counts[k], q]
    return log10_dot_product(quality_log10_probs, accumulate)
