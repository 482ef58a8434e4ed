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
jsonapi_view.naming
===================

A naming strategy translates the name of a property on the resource class
into the name used in the serialized representation (the JSON API member
name). It is only consulted, if a field does not declare an explicit
serialized name:

.. code-block:: python3

    class ArticleSchema(Schema):

        # "published_at" -> translated by the naming strategy
        published_at = fields.DateTime()

        # always "heading"
        title = fields.String(name="heading")
"""

__all__ = [
    "NamingStrategy",
    "IdenticalNaming",
    "CamelCaseNaming",
    "SnakeCaseNaming",
    "DasherizeNaming"
]

# std
import re


class NamingStrategy(object):
    """
    The base class for all naming strategies.
    """

    def translate_name(self, key):
        """
        Returns the serialized name for the property *key*.

        :arg str key:
            The name of the property on the resource class.
        :rtype: str
        """
        raise NotImplementedError()


class IdenticalNaming(NamingStrategy):
    """
    Uses the property name as it is.
    """

    def translate_name(self, key):
        return key


class CamelCaseNaming(NamingStrategy):
    """
    ``first_name`` becomes ``firstName``.
    """

    def translate_name(self, key):
        head, *tail = key.split("_")
        return head + "".join(part[:1].upper() + part[1:] for part in tail)


class SnakeCaseNaming(NamingStrategy):
    """
    ``firstName`` becomes ``first_name``.

    :arg str separator:
        Inserted between the words.
    :arg bool lower_case:
        If true, the result is converted to lower case.
    """

    WORD_BOUNDARY_RE = re.compile("([a-z0-9])([A-Z])")

    def __init__(self, separator="_", lower_case=True):
        self.separator = separator
        self.lower_case = lower_case
        return None

    def translate_name(self, key):
        name = self.WORD_BOUNDARY_RE.sub(r"\1" + self.separator + r"\2", key)
        return name.lower() if self.lower_case else name


class DasherizeNaming(SnakeCaseNaming):
    """
    ``first_name`` and ``firstName`` become ``first-name``, the member name
    style recommended by http://jsonapi.org/recommendations/#naming.
    """

    def __init__(self):
        super().__init__(separator="-", lower_case=True)
        return None

    def translate_name(self, key):
        return super().translate_name(key).replace("_", self.separator)
