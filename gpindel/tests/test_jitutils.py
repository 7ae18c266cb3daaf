import numpy as np
import pytest

from gpindel import jitutils


def test_sum_log10_probs():

    for _ in range(10):
        length = np.random.randint(2, 10)
        p = np.random.rand(length)
        answer = np.log10(np.sum(p))

        log_p = np.log10(p)
        query = jitutils.sum_log10_probs(log_p)

        assert np.round(query, 10) == np.round(answer, 10)


def test_sum_log10_probs_zeros():
    log_p = np.array([-np.inf, -2.0, -np.inf])
    assert jitutils.sum_log10_probs(log_p) == -2.0

    log_p = np.array([-np.inf, -np.inf])
    assert jitutils.sum_log10_probs(log_p) == -np.inf


def test_sum_log10_probs_underflow():
    # probabilities too small to represent outside of log space
    log_p = np.array([-400.0, -400.0])
    query = jitutils.sum_log10_probs(log_p)
    np.testing.assert_almost_equal(query, -400.0 + np.log10(2))


def test_log10_dot_product():
    for _ in range(10):
        length = np.random.randint(1, 10)
        x = np.random.rand(length)
        y = np.random.rand(length)
        answer = np.log10(np.dot(x, y))
        query = jitutils.log10_dot_product(np.log10(x), np.log10(y))
        np.testing.assert_almost_equal(query, answer)


def test_log10_cache():
    assert jitutils.LOG10_CACHE[0] == -np.inf
    np.testing.assert_almost_equal(jitutils.LOG10_CACHE[1:100], np.log10(np.arange(1, 100)))
    assert jitutils.log10_of_int(0, jitutils.LOG10_CACHE) == -np.inf
    n = len(jitutils.LOG10_CACHE) + 5
    np.testing.assert_almost_equal(
        jitutils.log10_of_int(n, jitutils.LOG10_CACHE), np.log10(n)
    )


@pytest.mark.parametrize("copy_number", [1, 2, 4, 12])
def test_log10_mismatch_table(copy_number):
    table = jitutils.log10_mismatch_table(copy_number, 60)
    assert table.shape == (copy_number + 1, 61)
    for j in range(copy_number + 1):
        for q in [1, 10, 30, 60]:
            e = 10 ** (-q / 10)
            p = j / copy_number * (1 - e) + e / 3 * (copy_number - j) / copy_number
            np.testing.assert_almost_equal(table[j, q], np.log10(p))


def test_log10_mismatch_table_values():
    table = jitutils.log10_mismatch_table(4, 60)
    np.testing.assert_almost_equal(table[4, 30], np.log10(0.999))
    np.testing.assert_almost_equal(table[0, 30], np.log10(0.001 / 3))
    # no error and no probability of a base call
    assert table[4, 0] == -np.inf


def test_log10_likelihood_read_matrix():
    matrix = np.array([[0.0, -2.0], [0.0, -2.0]])
    cache = jitutils.LOG10_CACHE
    llk = jitutils.log10_likelihood_read_matrix(matrix, np.array([2, 0]), 2, cache)
    assert llk == 0.0
    llk = jitutils.log10_likelihood_read_matrix(matrix, np.array([0, 2]), 2, cache)
    assert llk == -4.0
    llk = jitutils.log10_likelihood_read_matrix(matrix, np.array([1, 1]), 2, cache)
    np.testing.assert_almost_equal(llk, 2 * np.log10(0.5 * 1 + 0.5 * 0.01))


def test_log10_likelihood_read_matrix_empty():
    matrix = np.zeros((0, 3))
    llk = jitutils.log10_likelihood_read_matrix(
        matrix, np.array([1, 1, 2]), 4, jitutils.LOG10_CACHE
    )
    assert llk == 0.0


def test_log10_likelihood_allele_counts():
    table = jitutils.log10_mismatch_table(4, 60)
    observations = np.array([3, 1])
    counts = np.array([2, 2])
    quality_log10_probs = np.log10(np.array([0.25, 0.75]))
    actual = jitutils.log10_likelihood_allele_counts(
        observations, counts, table, quality_log10_probs, 20
    )
    expect = 0.0
    for q, p in zip([20, 21], [0.25, 0.75]):
        e = 10 ** (-q / 10)
        match = 0.5 * (1 - e) + e / 3 * 0.5
        expect += p * match**4
    np.testing.assert_almost_equal(actual, np.log10(expect))
