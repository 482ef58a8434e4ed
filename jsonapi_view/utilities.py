#!/usr/bin/env python3

# The MIT License (MIT)
#
# Copyright (c) 2016 Benedikt Schmitt
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
jsonapi_view.utilities
======================

This module contains some helpers, which are frequently needed in different
modules and situations.
"""

# std
import collections.abc


__all__ = [
    "Symbol",
    "is_plural"
]


class Symbol(object):
    """
    A simple symbol implementation.

    .. code-block:: python3

        foo = Symbol()
        assert foo == foo

        bar = Symbol()
        assert bar != foo

        assert Symbol("foo") != Symbol("foo")
    """

    def __init__(self, name=""):
        self.name = name
        return None

    def __str__(self):
        return self.name if self.name else repr(self)

    def __repr__(self):
        return "Symbol(name={})".format(self.name)

    def __eq__(self, other):
        return other is self

    def __ne__(self, other):
        return other is not self

    def __hash__(self):
        return id(self)


def is_plural(data):
    """
    Returns true, if *data* is a collection of resources and not a single
    resource:

    .. code-block:: python3

        >>> is_plural([article])
        True
        >>> is_plural(article)
        False

    Strings, bytes and mappings are iterable, but never a collection of
    resources.

    :arg data:
        The primary data of a document.
    :rtype: bool
    """
    if isinstance(data, (str, bytes, collections.abc.Mapping)):
        return False
    return isinstance(data, collections.abc.Iterable)
