import numpy as np
import pytest

from gpindel.errormodel import ErrorModel


def test_point_mass():
    model = ErrorModel.point_mass(30)
    assert model.min_quality == 30
    assert model.max_quality == 30
    np.testing.assert_array_equal(model.log10_probabilities(), [0.0])
    np.testing.assert_array_almost_equal(model.error_rates, [0.001])


def test_from_error_rate():
    model = ErrorModel.from_error_rate(0.001)
    assert model.min_quality == model.max_quality == 30


def test_from_quality_counts():
    model = ErrorModel.from_quality_counts([0, 0, 5, 0, 15, 0], min_quality=20)
    assert model.min_quality == 22
    assert model.max_quality == 24
    expect = np.log10([0.25, 0.0, 0.75])
    np.testing.assert_array_almost_equal(model.log10_probabilities(), expect)


def test_normalised():
    model = ErrorModel(10, np.log10([1.0, 2.0, 1.0]))
    probs = 10 ** model.log10_probabilities()
    np.testing.assert_array_almost_equal(probs, [0.25, 0.5, 0.25])


def test_log10_probabilities__range():
    model = ErrorModel(10, np.log10([0.5, 0.5]))
    actual = model.log10_probabilities(9, 12)
    expect = [-np.inf, np.log10(0.5), np.log10(0.5), -np.inf]
    np.testing.assert_array_almost_equal(actual, expect)
    actual = model.log10_probabilities(20, 21)
    assert np.all(actual == -np.inf)


def test_empty_quality_range():
    with pytest.raises(ValueError):
        ErrorModel(30, np.array([]))
    with pytest.raises(ValueError):
        ErrorModel.from_quality_counts([0, 0, 0])
    with pytest.raises(ValueError):
        ErrorModel(30, np.array([-np.inf]))
