# -*- coding: utf-8 -*-
"""Miscellaneous utility functions."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

from numbers import Integral, Real


__all__ = ["joins", "class_name", "is_number", "is_integer"]


def joins(*parts, sep=" "):
    """Join a sequence as a string with given separator.

    This is a shortcut function that saves you the effort of converting
    each element in a str.join(sequence) call to a str first.

    :param sequence parts: A sequence of items to join
    :param str sep: The separator to join them with
    :returns str: The newly joined string

    """
    if not parts or not any(parts):
        return ""
    return sep.join(map(str, parts))


def class_name(obj):
    """Fetch the class name of an object (class or instance).

    :param any obj: The object you want the class name of
    :returns str: The class name

    """
    if isinstance(obj, type):
        # It's a class.
        return obj.__name__
    else:
        # It's an instance of a class.
        return obj.__class__.__name__


def is_number(obj):
    """Determine if an object is a real number.

    Booleans are technically integers, but passing one where a number is
    expected is almost always a mistake, so they don't count.

    :param any obj: The object to test
    :returns bool: Whether it is a number or not

    """
    return isinstance(obj, Real) and not isinstance(obj, bool)


def is_integer(obj):
    """Determine if an object is an integer (and not a bool).

    :param any obj: The object to test
    :returns bool: Whether it is an integer or not

    """
    return isinstance(obj, Integral) and not isinstance(obj, bool)
