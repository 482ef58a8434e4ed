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
jsonapi_view.schema.fields
==========================

.. note::

    Always remember that you can model a resource completly with the fields
    in :mod:`~jsonapi_view.schema.base_fields`.

.. sidebar:: Index

    *   :class:`String`
    *   :class:`Integer`
    *   :class:`Float`
    *   :class:`Complex`
    *   :class:`Decimal`
    *   :class:`Fraction`
    *   :class:`DateTime`
    *   :class:`Date`
    *   :class:`TimeDelta`
    *   :class:`UUID`
    *   :class:`Boolean`
    *   :class:`URI`
    *   :class:`Dict`
    *   :class:`List`

This module contains attribute fields for several standard Python types and
classes from the standard library. Each field knows how to encode a value of
its type into something :func:`json.dumps` accepts.
"""

__all__ = [
    "String",
    "Integer",
    "Float",
    "Complex",
    "Decimal",
    "Fraction",
    "DateTime",
    "Date",
    "TimeDelta",
    "UUID",
    "Boolean",
    "URI",
    "Dict",
    "List",
    "field_for_value"
]

# std
import collections.abc
import datetime
import decimal
import fractions
import uuid

# third party
import dateutil.tz
import rfc3986

# local
from .base_fields import Attribute


class String(Attribute):

    def encode(self, schema, data):
        return None if data is None else str(data)


class Integer(Attribute):

    def encode(self, schema, data):
        return None if data is None else int(data)


class Float(Attribute):

    def encode(self, schema, data):
        return None if data is None else float(data)


class Complex(Attribute):
    """
    Encodes a :class:`complex` number as JSON object with a *real* and *imag*
    member::

        {"real": 1.2, "imag": 42}
    """

    def encode(self, schema, data):
        if data is None:
            return None
        return {"real": data.real, "imag": data.imag}


class Decimal(Attribute):
    """
    Encodes a :class:`decimal.Decimal` as string, so that no precision is
    lost.
    """

    def encode(self, schema, data):
        return None if data is None else str(data)


class Fraction(Attribute):
    """
    Encodes a :class:`fractions.Fraction` as JSON object with a *numerator*
    and *denominator* member::

        {"numerator": 2, "denominator": 3}
    """

    def encode(self, schema, data):
        if data is None:
            return None
        return {"numerator": data.numerator, "denominator": data.denominator}


class DateTime(Attribute):
    """
    Encodes a :class:`datetime.datetime` as ISO 8601 string.

    :arg str tz:
        The name of the time zone (e.g. *UTC*, *Europe/Berlin*), all values
        are converted to. Naive values are assumed to be in this time zone.
        If not given, the values are encoded as they are.
    """

    def __init__(self, *, tz=None, **kargs):
        super().__init__(**kargs)
        self.tz = dateutil.tz.gettz(tz) if tz else None
        return None

    def encode(self, schema, data):
        if data is None:
            return None
        if self.tz is not None:
            if data.tzinfo is None:
                data = data.replace(tzinfo=self.tz)
            else:
                data = data.astimezone(self.tz)
        return data.isoformat()


class Date(Attribute):
    """
    Encodes a :class:`datetime.date` as ISO 8601 string.
    """

    def encode(self, schema, data):
        return None if data is None else data.isoformat()


class TimeDelta(Attribute):
    """
    Encodes a :class:`datetime.timedelta` as the total number of seconds.
    """

    def encode(self, schema, data):
        return None if data is None else data.total_seconds()


class UUID(Attribute):
    """
    Encodes a :class:`uuid.UUID` as its canonical hex string.
    """

    def encode(self, schema, data):
        return None if data is None else str(data)


class Boolean(Attribute):

    def encode(self, schema, data):
        return None if data is None else bool(data)


class URI(Attribute):
    """
    Encodes an URI as normalized string (lower case scheme and host,
    normalized percent encoding, ...).

    :seealso: https://tools.ietf.org/html/rfc3986#section-6
    """

    def encode(self, schema, data):
        if data is None:
            return None
        return rfc3986.uri_reference(str(data)).normalize().unsplit()


class Dict(Attribute):
    """
    Encodes a mapping as JSON object. The values are encoded with *field*.

    :arg Attribute field:
        The field used to encode the values. If not given, the values are
        encoded as they are.
    """

    def __init__(self, field=None, **kargs):
        super().__init__(**kargs)
        self.field = field
        return None

    def encode(self, schema, data):
        if data is None:
            return None
        if self.field is None:
            return dict(data)
        return {
            key: self.field.encode(schema, value)\
            for key, value in data.items()
        }


class List(Attribute):
    """
    Encodes an iterable as JSON array. The items are encoded with *field*.

    :arg Attribute field:
        The field used to encode the items. If not given, the items are
        encoded as they are.
    """

    def __init__(self, field=None, **kargs):
        super().__init__(**kargs)
        self.field = field
        return None

    def encode(self, schema, data):
        if data is None:
            return None
        if self.field is None:
            return list(data)
        return [self.field.encode(schema, item) for item in data]


def field_for_value(value):
    """
    Returns the attribute field, which is able to encode *value*. This is
    used when no schema declares the type of a property (e.g. for columns of
    an ORM mapped class).

    .. code-block:: python3

        >>> field_for_value(datetime.date(2016, 1, 1))
        Date(key=None, name='')

    :arg value:
    :rtype: Attribute
    """
    # bool is a subclass of int and datetime a subclass of date, so the
    # order matters.
    types = [
        (bool, Boolean),
        (int, Integer),
        (float, Float),
        (complex, Complex),
        (decimal.Decimal, Decimal),
        (fractions.Fraction, Fraction),
        (datetime.datetime, DateTime),
        (datetime.date, Date),
        (datetime.time, String),
        (datetime.timedelta, TimeDelta),
        (uuid.UUID, UUID),
        (str, Attribute),
        (collections.abc.Mapping, Dict),
        (collections.abc.Set, List),
        (list, List),
        (tuple, List)
    ]
    for cls, field in types:
        if isinstance(value, cls):
            return field()
    return Attribute()
