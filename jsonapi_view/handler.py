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
jsonapi_view.handler
====================

The :class:`JsonApiHandler` is the piece, which puts all components together.
It receives the data returned by a controller, builds the JSON API document
and wraps it into a response:

.. code-block:: python3

    introspector = SchemaIntrospector([ArticleSchema(), PersonSchema()])
    serializer = SchemaSerializer(introspector, CamelCaseNaming())
    handler = JsonApiHandler(introspector, serializer)

    request = Request("/api/articles/1?included=author.posts,comments")
    response = handler.handle(request, article)

By overriding :meth:`JsonApiHandler.handle`, it can be easily integrated in
other web frameworks.
"""

__all__ = [
    "JsonApiHandler",
    "CONTENT_TYPE"
]

# std
import json
import logging

# third party
from jsonpointer import JsonPointer

# local
from .builder import ResourceBuilder, child_pointer
from .document import ResourceDocument, CollectionDocument
from .include import EMPTY_SCOPE, parse_include_parameter, include_paths
from .response import Response
from .utilities import is_plural


LOG = logging.getLogger(__file__)

#: The JSON API media type.
CONTENT_TYPE = "application/vnd.api+json"


class JsonApiHandler(object):
    """
    Builds JSON API documents and responses.

    :arg ~jsonapi_view.metadata.MetadataIntrospector introspector:
        Provides the identifier and association metadata of the objects.
    :arg ~jsonapi_view.serializer.AttributeValueProvider serializer:
        Provides the serialized attribute values of the objects.
    :arg bool debug:
        If true, the JSON output is indented and the keys are sorted.
    :arg dict settings:
        A dictionary with configuration values:

        *   *include_parameter*: The name of the query parameter with the
            inclusion paths (default: ``"included"``).
        *   *deduplicate_included*: If true, a resource reachable by
            different relationship paths is included only once
            (default: *False*).
        *   *jsonapi_object*: If true, the top level *jsonapi* object is
            added to each document (default: *False*).
    """

    def __init__(self, introspector, serializer, *, debug=False, settings=None):
        """ """
        #: When *debug* is *True*, the JSON output is more readable.
        self.debug = debug

        #: A dictionary with the configuration values.
        self.settings = settings or {}
        assert isinstance(self.settings, dict)

        #: The :class:`~jsonapi_view.builder.ResourceBuilder` used to build
        #: the resource objects.
        self.builder = ResourceBuilder(introspector, serializer)
        return None

    @property
    def include_parameter(self):
        return self.settings.get("include_parameter", "included")

    def dump_json(self, obj):
        """
        Serializes the Python object *obj* to a JSON string.

        The default implementation uses Python's :mod:`json` module.

        You *can* override this method.
        """
        indent = 4 if self.debug else None
        sort_keys = self.debug
        return json.dumps(obj, indent=indent, sort_keys=sort_keys)

    def create_document(self, plural):
        """
        Returns a new, empty :class:`~jsonapi_view.document.CollectionDocument`
        if *plural* is true and a
        :class:`~jsonapi_view.document.ResourceDocument` otherwise.
        """
        kargs = dict()
        kargs["deduplicate"] = bool(self.settings.get("deduplicate_included"))
        kargs["jsonapi_object"] = bool(self.settings.get("jsonapi_object"))

        if plural:
            return CollectionDocument(**kargs)
        return ResourceDocument(**kargs)

    def build_document(self, data, included=None):
        """
        Builds the JSON API document for the primary *data*. If *data* is a
        collection (list, tuple, generator, ...), a
        :class:`~jsonapi_view.document.CollectionDocument` is returned, even
        if it contains only one resource.

        All relationships of the primary resources are part of the document.
        The *included* scope decides which related resources are included
        and which relationships the included resources expose.

        :arg data:
            A single object or an iterable of objects.
        :arg included:
            The inclusion scope returned by
            :func:`~jsonapi_view.include.parse_include`.

        :rtype: ~jsonapi_view.document.Document
        """
        included = included if included is not None else EMPTY_SCOPE

        if is_plural(data):
            document = self.create_document(plural=True)
            data_sp = JsonPointer("/data")
            for i, resource_data in enumerate(data):
                document.add_data(self.builder.build_resource_object(
                    document, resource_data, included,
                    sp=child_pointer(data_sp, i)
                ))
        else:
            document = self.create_document(plural=False)
            document.set_data(self.builder.build_resource_object(
                document, data, included
            ))

        LOG.debug(
            "Built %s with %d included resources.",
            type(document).__name__, len(document.included)
        )
        return document

    def handle(self, request, data):
        """
        Builds the document for *data* with the inclusion paths requested by
        the client and returns a :class:`~jsonapi_view.response.Response`.

        Errors raised while the document is built are not catched.

        :arg ~jsonapi_view.request.Request request:
        :arg data:
            The primary data returned by the controller.

        :rtype: ~jsonapi_view.response.Response
        """
        included = parse_include_parameter(
            request.get_query_argument(self.include_parameter, "")
        )
        LOG.debug("Included relationship paths: %s", include_paths(included))

        document = self.build_document(data, included)

        resp = Response(
            status=200,
            headers={"Content-Type": CONTENT_TYPE},
            body=self.dump_json(document.to_dict()).encode()
        )
        return resp
