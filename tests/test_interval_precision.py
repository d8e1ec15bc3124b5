"""Tests for intervals and precision conversion."""

import numpy as np
import pytest

from fitfunctions import ConversionError, Interval, InvalidArgument
from fitfunctions.core.interval import default_bounds
from fitfunctions.core.precision import resolve_precision, to_precision, to_scalar


def test_interval_behaves_like_a_pair():
    bound = Interval(1.0, 3.0)
    left, right = bound
    assert (left, right) == (1.0, 3.0)
    assert bound == (1.0, 3.0)
    assert bound.width == 2.0
    assert 2.0 in bound
    assert 1.0 in bound and 3.0 in bound
    assert 3.5 not in bound
    assert str(bound) == '1.0..3.0'


def test_reversed_interval_is_empty():
    assert 1.0 not in Interval(3.0, 1.0)


def test_interval_membership_is_range_membership():
    bound = Interval(0.0, 10.0)
    assert 5.0 in bound
    assert 5.0 not in tuple(bound)


@pytest.mark.parametrize('dtype', [np.float16, np.float32, np.float64])
def test_default_bounds_do_not_overflow(dtype):
    bound = default_bounds(dtype)
    assert isinstance(bound.left, dtype)
    assert bound.left == -bound.right
    assert np.isfinite(bound.right - bound.left)
    assert bound.right == np.finfo(dtype).max / dtype(2)


@pytest.mark.parametrize('precision, expected', [
    (float, np.float64),
    ('float32', np.float32),
    (np.dtype('float16'), np.float16),
    (np.longdouble, np.longdouble),
])
def test_resolve_precision(precision, expected):
    assert resolve_precision(precision) is expected


def test_resolve_precision_rejects_integers():
    with pytest.raises(InvalidArgument):
        resolve_precision(np.int64)


def test_to_precision_converts():
    values = to_precision([1, 2.5, np.nan, -np.inf], np.float32)
    assert values.dtype == np.float32
    assert values[:2].tolist() == [1.0, 2.5]
    assert np.isnan(values[2])
    assert values[3] == -np.inf


def test_to_precision_detects_overflow():
    with pytest.raises(ConversionError):
        to_precision([1.0, 1e5], np.float16)


def test_to_scalar():
    value = to_scalar(3, np.float32)
    assert isinstance(value, np.float32)
    with pytest.raises(ConversionError):
        to_scalar([1, 2], np.float32)
    with pytest.raises(ConversionError):
        to_scalar('abc', np.float64)


def test_to_precision_rejects_numeric_strings():
    with pytest.raises(ConversionError):
        to_precision(['1.5', '2'], np.float64)
    with pytest.raises(ConversionError):
        to_precision([1.0, b'2'], np.float64)
    with pytest.raises(ConversionError):
        to_scalar('1.5', np.float64)
