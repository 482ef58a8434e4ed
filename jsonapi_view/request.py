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
jsonapi_view.request
====================

A minimal wrapper around the request received by the web framework. The
handler only needs the query parameters of the requested URL.
"""

__all__ = [
    "Request"
]

# std
import urllib.parse

# third party
from cached_property import cached_property


class Request(object):
    """
    :arg str uri:
        The requested URI (with the query string).
    :arg dict headers:
        The request headers.
    """

    def __init__(self, uri, headers=None):
        """ """
        self.uri = uri
        self.headers = headers or {}
        return None

    @cached_property
    def parsed_uri(self):
        """
        The :func:`~urllib.parse.urlsplit` result of :attr:`uri`.
        """
        return urllib.parse.urlsplit(self.uri)

    @cached_property
    def query(self):
        """
        A dictionary, which maps each query parameter to a list with all of
        its values.
        """
        return urllib.parse.parse_qs(
            self.parsed_uri.query, keep_blank_values=True
        )

    def get_query_argument(self, name, default=None):
        """
        Returns the last value of the query parameter *name* or *default*,
        if the parameter is not present.
        """
        values = self.query.get(name)
        return values[-1] if values else default
