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
jsonapi_view.response
=====================

The response envelope returned by the
:class:`~jsonapi_view.handler.JsonApiHandler`. It's up to the web framework
to convert it into its own response type.
"""

__all__ = [
    "Response"
]


class Response(object):
    """
    :arg int status:
        The HTTP status code
    :arg dict headers:
        The response headers
    :arg bytes body:
        The encoded response body
    """

    def __init__(self, status=200, headers=None, body=b""):
        """ """
        self.status = status
        self.headers = headers or {}
        self.body = body
        return None

    def __repr__(self):
        return "Response(status={}, headers={})".format(
            self.status, self.headers
        )
