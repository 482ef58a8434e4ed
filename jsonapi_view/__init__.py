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
jsonapi_view
============

*jsonapi-view* converts domain objects into http://jsonapi.org documents:
a primary resource (or a collection of resources) with its attributes and
relationships, and the related resources requested by the client with
dot separated inclusion paths.

.. code-block:: python3

    from jsonapi_view import (
        JsonApiHandler, Request, SchemaIntrospector, SchemaSerializer
    )

    introspector = SchemaIntrospector([ArticleSchema(), PersonSchema()])
    serializer = SchemaSerializer(introspector)
    handler = JsonApiHandler(introspector, serializer)

    response = handler.handle(Request("/articles?included=author"), articles)
"""

# local
from . import version
from . import errors
from . import schema
from .builder import ResourceBuilder
from .document import (
    ResourceIdentifier, ResourceObject, ToOneRelationship, ToManyRelationship,
    ResourceDocument, CollectionDocument
)
from .handler import JsonApiHandler, CONTENT_TYPE
from .include import parse_include, parse_include_parameter, include_paths
from .metadata import MetadataIntrospector, SchemaIntrospector
from .naming import (
    IdenticalNaming, CamelCaseNaming, SnakeCaseNaming, DasherizeNaming
)
from .request import Request
from .response import Response
from .serializer import AttributeValueProvider, SchemaSerializer
