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
jsonapi_view.errors
===================

This module contains the exceptions raised while a JSON API document is
built. All of them are *fatal*: the document build is aborted and no partial
document is returned. They describe programming or configuration errors
(missing metadata, a serializer which disagrees with the metadata, ...), so
it's up to the caller to translate them into a failure response.
"""

__all__ = [
    "Error",
    "MissingIdentifierError",
    "IdentifierPropertyNotFoundError",
    "AttributeLookupMismatchError",
    "NamingStrategyUnavailableError",
    "MetadataUnavailableError"
]

# third party
from jsonpointer import JsonPointer


class Error(Exception):
    """
    The base class for all errors raised by *jsonapi-view*.

    :arg str detail:
        A human readable description of the problem.
    :arg source_pointer:
        A :class:`jsonpointer.JsonPointer` (or its string representation),
        which points to the member in the output document, which could not
        be built.
    """

    def __init__(self, detail="", *, source_pointer=None):
        super().__init__(detail)
        self.detail = detail

        if isinstance(source_pointer, str):
            source_pointer = JsonPointer(source_pointer)
        self.source_pointer = source_pointer
        return None

    def __str__(self):
        if self.source_pointer is None:
            return self.detail
        return "{} (at '{}')".format(self.detail, self.source_pointer.path)


class MissingIdentifierError(Error):
    """
    Raised if the type of an object declares zero or more than one identifier
    field.
    """


class IdentifierPropertyNotFoundError(Error):
    """
    Raised if the declared identifier field can not be found on the object.
    """


class AttributeLookupMismatchError(Error):
    """
    Raised if a field is known to the metadata, but has no entry in the
    serialized representation of the object.
    """


class NamingStrategyUnavailableError(Error):
    """
    Raised if the serializer does not expose a naming strategy, so that the
    serialized names of the fields can not be resolved.
    """


class MetadataUnavailableError(Error):
    """
    Raised if there is no metadata for the type of an object.
    """
