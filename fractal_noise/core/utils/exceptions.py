# -*- coding: utf-8 -*-
"""Utility exception classes."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)


class AlreadyExists(Exception):

    """Exception for adding an item to a collection it is already in."""

    def __init__(self, key, old, new=None):
        super().__init__(key)
        self.key = key
        self.old = old
        self.new = new


class ConfigurationError(ValueError):

    """Exception for an invalid noise option."""

    def __init__(self, option, value, reason):
        super().__init__("invalid {}={!r}: {}".format(option, value, reason))
        self.option = option
        self.value = value
        self.reason = reason


class DimensionMismatch(ValueError):

    """Exception for coordinates that don't match a field's dimensions."""

    def __init__(self, expected, actual):
        super().__init__("expected {} coordinates, got {}"
                         .format(expected, actual))
        self.expected = expected
        self.actual = actual
