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
jsonapi_view.include
====================

.. seealso::

    http://jsonapi.org/format/#fetching-includes

The client requests related resources with a list of dot separated
relationship paths::

    GET /articles/1?included=author.posts,comments

This module converts the flat path list into a nested *inclusion scope*, which
is threaded through the resource builder and re-sliced at each relationship:

.. code-block:: python3

    >>> parse_include(["author.posts", "comments"])
    {"author": {"posts": {}}, "comments": {}}

An empty mapping is a leaf: the relationship is included, but none of the
relationships of the included resources.
"""

__all__ = [
    "EMPTY_SCOPE",
    "parse_include",
    "parse_include_parameter",
    "include_paths"
]

# std
import collections
import types


#: The scope which includes nothing.
EMPTY_SCOPE = types.MappingProxyType({})


def parse_include(paths):
    """
    Converts the list of dot separated relationship *paths* into a nested,
    read-only mapping. Overlapping paths are merged. Empty paths and empty
    segments (``"author..posts"``, ``".comments"``) are ignored.

    :arg list paths:
        A list of relationship paths, e.g. ``["author.posts", "comments"]``.

    :rtype: types.MappingProxyType
    """
    # relationship name -> remaining paths below it
    children = collections.OrderedDict()
    for path in paths:
        head, *tail = [part for part in path.split(".") if part] or [None]
        if head is None:
            continue

        rest = children.setdefault(head, [])
        if tail:
            rest.append(".".join(tail))

    if not children:
        return EMPTY_SCOPE
    return types.MappingProxyType(collections.OrderedDict(
        (name, parse_include(rest)) for name, rest in children.items()
    ))


def parse_include_parameter(value):
    """
    Parses the raw value of the *include* query parameter, a comma separated
    list of relationship paths. *None* and the empty string are tolerated and
    result in the :data:`EMPTY_SCOPE`.

    .. code-block:: python3

        >>> parse_include_parameter("author.posts, comments")
        {"author": {"posts": {}}, "comments": {}}

    :arg str value:
    :rtype: types.MappingProxyType
    """
    if not value:
        return EMPTY_SCOPE
    return parse_include([path.strip() for path in value.split(",")])


def include_paths(scope, prefix=""):
    """
    The inverse of :func:`parse_include`. Returns the list of the leaf paths
    in the *scope*:

    .. code-block:: python3

        >>> include_paths({"author": {"posts": {}}, "comments": {}})
        ["author.posts", "comments"]

    :arg scope:
        An inclusion scope
    :rtype: list
    """
    paths = []
    for name, subscope in (scope or {}).items():
        path = prefix + name
        if subscope:
            paths.extend(include_paths(subscope, prefix=path + "."))
        else:
            paths.append(path)
    return paths
