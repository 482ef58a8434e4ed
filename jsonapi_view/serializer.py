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
jsonapi_view.serializer
=======================

The document builder never encodes attribute values itself. It asks an
:class:`AttributeValueProvider` for the serialized representation of an
object and picks the values from it. This way, all serialization rules
(custom getters, value encoding, naming strategy) are applied before the
representation is shaped into a JSON API resource object.
"""

__all__ = [
    "AttributeValueProvider",
    "SchemaSerializer"
]

# std
import collections

# local
from .errors import NamingStrategyUnavailableError
from .naming import IdenticalNaming
from .schema.fields import field_for_value


class AttributeValueProvider(object):
    """
    The interface the document builder uses to get the serialized values of
    an object.

    :arg ~jsonapi_view.naming.NamingStrategy naming_strategy:
        Translates property names into serialized names.
    """

    def __init__(self, naming_strategy=None):
        """ """
        self.naming_strategy = naming_strategy
        return None

    def serialized_name(self, key, name=""):
        """
        Returns the serialized name of the property *key*. An explicitly
        declared *name* always wins over the naming strategy.

        :arg str key:
            The name of the property on the resource class.
        :arg str name:
            The explicitly declared serialized name (may be empty).

        :raises ~jsonapi_view.errors.NamingStrategyUnavailableError:
            If *name* is empty and no naming strategy is available.
        """
        if name:
            return name
        if self.naming_strategy is None:
            raise NamingStrategyUnavailableError(
                "Could not get the serializer naming strategy to translate "\
                "'{}'.".format(key)
            )
        return self.naming_strategy.translate_name(key)

    def encode_id(self, obj, value):
        """
        Encodes the identifier *value* of *obj*, so that it can be serialized
        with :func:`json.dumps`. JSON native ids (``int``, ``str``) are kept,
        others (:class:`uuid.UUID`, :class:`decimal.Decimal`, dates, ...) are
        encoded by the field returned from
        :func:`~jsonapi_view.schema.fields.field_for_value`.

        You *can* override this method.
        """
        return field_for_value(value).encode(None, value)

    def serialize(self, obj):
        """
        Returns a dictionary, which maps the serialized name of each
        (non-association) field of *obj* to its encoded value.

        :rtype: dict
        """
        raise NotImplementedError()


class SchemaSerializer(AttributeValueProvider):
    """
    Encodes the fields described by the schemas of a
    :class:`~jsonapi_view.metadata.SchemaIntrospector`:

    .. code-block:: python3

        serializer = SchemaSerializer(introspector, CamelCaseNaming())
        serializer.serialize(article)
        # {"id": 1, "title": "Hello", "publishedAt": "2016-01-01"}

    Relationships are not part of the serialized representation.

    :arg ~jsonapi_view.metadata.SchemaIntrospector introspector:
    :arg ~jsonapi_view.naming.NamingStrategy naming_strategy:
        Defaults to :class:`~jsonapi_view.naming.IdenticalNaming`.
    """

    def __init__(self, introspector, naming_strategy=None):
        """ """
        super().__init__(naming_strategy or IdenticalNaming())
        self.introspector = introspector
        return None

    def serialize(self, obj):
        schema = self.introspector.get_schema(obj)

        d = collections.OrderedDict()
        for field in schema.fields:
            if field.is_association:
                continue
            name = self.serialized_name(field.key, field.name)
            d[name] = schema.encode_value(field, obj)
        return d
