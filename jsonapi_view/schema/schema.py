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
jsonapi_view.schema.schema
==========================

This module contains the base schema, which describes the identity,
attributes and relationships of a resource class based on
:class:`fields <jsonapi_view.schema.base_fields.BaseField>`:

.. code-block:: python3

    class ArticleSchema(Schema):
        resource_class = Article

        id = Identifier()
        title = fields.String()
        author = ToOneRelationship()
        comments = ToManyRelationship()
"""

__all__ = [
    "SchemaMeta",
    "Schema"
]

# std
import collections
import copy
import logging

# third party
from cached_property import cached_property

# local
from jsonapi_view.schema.base_fields import BaseField


LOG = logging.getLogger(__file__)


class SchemaMeta(type):

    def __new__(cls, name, bases, attrs):
        """
        Detects all fields and wires everything up. These class attributes are
        defined here:

        *   *type*

            The JSON API typename

        *   *_fields_by_key*

            Maps the key (schema property name) to the associated
            :class:`BaseField`. The fields are ordered by their declaration,
            inherited fields first.

        :arg str name:
            The name of the schema class
        :arg tuple bases:
            The direct bases of the schema class
        :arg dict attrs:
            A dictionary with all properties defined on the schema class
            (attributes, methods, ...)
        """
        fields_by_key = collections.OrderedDict()

        # Create a copy of the inherited fields.
        for base in reversed(bases):
            fields_by_key.update(getattr(base, "_fields_by_key", {}))
        fields_by_key = copy.deepcopy(fields_by_key)

        for key, prop in attrs.items():
            if isinstance(prop, BaseField):
                prop.key = key
                prop.mapped_key = prop.mapped_key or key
                fields_by_key[key] = prop
        attrs["_fields_by_key"] = fields_by_key

        # Determine 'type' name.
        if (not attrs.get("type")) and attrs.get("resource_class"):
            attrs["type"] = attrs["resource_class"].__name__.lower()
        return super().__new__(cls, name, bases, attrs)


class Schema(metaclass=SchemaMeta):
    """
    A schema describes a resource class: which property holds the id, which
    properties are attributes and which are relationships to other resources.

    The schema is the default source for the
    :class:`~jsonapi_view.metadata.SchemaIntrospector` and the
    :class:`~jsonapi_view.serializer.SchemaSerializer`.
    """

    #: The resource class associated with this schema.
    resource_class = None

    #: The JSON API *type*. (Leave it empty to derive it automatic from the
    #: resource class name).
    type = ""

    def __init__(self):
        """ """
        if not self.type and self.resource_class is None:
            LOG.warning(
                "The schema '%s' has neither a type nor a resource class.",
                type(self).__name__
            )
        return None

    @cached_property
    def typename(self):
        """
        The JSON API type. Falls back to the lowercased name of the schema
        class.
        """
        return self.type or type(self).__name__.lower()

    @cached_property
    def fields(self):
        """
        A list with all fields in declaration order.
        """
        return list(self._fields_by_key.values())

    @cached_property
    def identifier_fields(self):
        """
        A list with all :class:`identifier
        <jsonapi_view.schema.base_fields.Identifier>` fields.
        """
        return [field for field in self.fields if field.identifier]

    @cached_property
    def attributes(self):
        """
        A list with all fields, which are neither an identifier nor a
        relationship.
        """
        return [
            field for field in self.fields\
            if not (field.identifier or field.is_association)
        ]

    @cached_property
    def relationships(self):
        """
        A list with all relationship fields.
        """
        return [field for field in self.fields if field.is_association]

    def get_field(self, key):
        """
        Returns the field with the key *key*.

        :raises KeyError:
        """
        return self._fields_by_key[key]

    def get_value(self, field, resource):
        """
        Reads the (not encoded) value of the *field* from the *resource*.
        """
        return field.get(self, resource)

    def encode_value(self, field, resource):
        """
        Reads the value of the *field* from the *resource* and encodes it.
        """
        return field.encode(self, field.get(self, resource))
