# -*- coding: utf-8 -*-
"""Tests for miscellaneous utility functions."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

from decimal import Decimal
from fractions import Fraction

from fractal_noise.core import utils


# Tests for the 'joins' string joining utility function.

def test_joins_nothing():
    """Test that joining nothing gets us nothing."""
    assert utils.joins() == ""


def test_joins_non_strings():
    """Test that we can join both strings and non-strings."""
    assert utils.joins("test", "number", 3) == "test number 3"


def test_joins_given_separator():
    """Test that we can join with a given separator."""
    assert utils.joins(10, 2, 2014, sep="/") == "10/2/2014"


# Tests for the rest of the utility functions.

def test_class_name():

    """Test that we can get a class name.

    The name of an instance of a class should be the same as the class itself.

    """

    class _TestClass:
        pass

    instance = _TestClass()

    assert (utils.class_name(_TestClass)
            == utils.class_name(instance)
            == "_TestClass")


def test_is_number():
    """Test that we can determine if an object is a real number."""
    assert utils.is_number(0) is True
    assert utils.is_number(-2.5) is True
    assert utils.is_number(Fraction(1, 3)) is True
    assert utils.is_number(float("inf")) is True
    assert utils.is_number(True) is False
    assert utils.is_number("1") is False
    assert utils.is_number(None) is False
    assert utils.is_number(1j) is False
    assert utils.is_number(Decimal("1.5")) is False


def test_is_integer():
    """Test that we can determine if an object is an integer."""
    assert utils.is_integer(3) is True
    assert utils.is_integer(-3) is True
    assert utils.is_integer(3.0) is False
    assert utils.is_integer(False) is False
    assert utils.is_integer("3") is False
