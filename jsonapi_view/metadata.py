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
jsonapi_view.metadata
=====================

The document builder does not know anything about the resource classes. All
it needs to know about an object (its type, the identifier field, which
fields are relationships, ...) is queried from a
:class:`MetadataIntrospector`.

The :class:`SchemaIntrospector` is the default implementation and reads the
metadata from :class:`~jsonapi_view.schema.schema.Schema` instances. The
:mod:`jsonapi_view.ext.sqlalchemy` extension reads it from the SQLAlchemy
mapper of an object.
"""

__all__ = [
    "TO_ONE",
    "TO_MANY",
    "FieldMetadata",
    "MetadataIntrospector",
    "SchemaIntrospector"
]

# std
import collections
import logging

# local
from .errors import MetadataUnavailableError
from .utilities import Symbol


LOG = logging.getLogger(__file__)

ARG_DEFAULT = Symbol("ARG_DEFAULT")

#: The cardinality of a *to-one* association.
TO_ONE = "to-one"

#: The cardinality of a *to-many* association.
TO_MANY = "to-many"


class FieldMetadata(collections.namedtuple(
        "FieldMetadata", ["key", "serialized_name", "identifier", "association"]
    )):
    """
    Describes a single field of a resource class:

    .. code-block:: python3

        FieldMetadata(
            key="author", serialized_name="", identifier=False,
            association=TO_ONE
        )

    :arg str key:
        The name of the property on the resource class.
    :arg str serialized_name:
        The explicitly declared name in the serialized representation or an
        empty string, if the naming strategy decides.
    :arg bool identifier:
        True, if the field holds the id of the resource.
    :arg str association:
        :data:`TO_ONE`, :data:`TO_MANY` or *None*, if the field is not an
        association.
    """

    __slots__ = ()

    @property
    def is_association(self):
        return self.association is not None

    @property
    def to_one(self):
        return self.association == TO_ONE

    @property
    def to_many(self):
        return self.association == TO_MANY


class MetadataIntrospector(object):
    """
    The interface the document builder uses to query the metadata of an
    object. All methods receive the object itself, not its class.
    """

    def type_name(self, obj):
        """
        Returns the JSON API type of *obj*.

        :raises ~jsonapi_view.errors.MetadataUnavailableError:
        :rtype: str
        """
        raise NotImplementedError()

    def fields(self, obj):
        """
        Returns all fields of *obj* in a stable order.

        :raises ~jsonapi_view.errors.MetadataUnavailableError:
        :rtype: list
        :returns: A list of :class:`FieldMetadata`.
        """
        raise NotImplementedError()

    def identifier_fields(self, obj):
        """
        Returns all fields of *obj*, which are marked as identifier. The
        builder makes sure, that there is exactly one.

        :rtype: list
        """
        return [field for field in self.fields(obj) if field.identifier]

    def has_property(self, obj, field):
        """
        Returns true, if the *field* can be read from *obj*.

        :arg FieldMetadata field:
        :rtype: bool
        """
        raise NotImplementedError()

    def get_value(self, obj, field):
        """
        Returns the raw value of the *field*. This is the id for identifier
        fields, the related object (or *None*) for to-one associations and an
        iterable of related objects for to-many associations.

        :arg FieldMetadata field:
        """
        raise NotImplementedError()


class SchemaIntrospector(MetadataIntrospector):
    """
    Reads the metadata from the :class:`~jsonapi_view.schema.schema.Schema`
    registered for the class of an object:

    .. code-block:: python3

        introspector = SchemaIntrospector()
        introspector.add_schema(ArticleSchema())
        introspector.add_schema(PersonSchema())

    :arg list schemas:
        A list with schemas, which are added immediately.
    """

    def __init__(self, schemas=None):
        """ """
        # resource class to schema
        self._schema_by_resource_class = {}

        # schema to field metadata
        self._fields_by_schema = {}

        for schema in schemas or []:
            self.add_schema(schema)
        return None

    def add_schema(self, schema):
        """
        Registers the *schema* for its resource class.

        :arg ~jsonapi_view.schema.schema.Schema schema:
        """
        if schema.resource_class is None:
            LOG.warning(
                "The schema '%s' is not bound to a resource class.",
                schema.typename
            )
            return None

        self._schema_by_resource_class[schema.resource_class] = schema
        self._fields_by_schema[schema] = [
            FieldMetadata(
                key=field.key,
                serialized_name=field.name,
                identifier=field.identifier,
                association=TO_ONE if field.to_one else\
                    TO_MANY if field.to_many else None
            )
            for field in schema.fields
        ]
        return None

    def get_schema(self, obj, default=ARG_DEFAULT):
        """
        Returns the schema associated with the class of *obj*. Schemas
        registered for a base class are used for subclasses too.

        :arg obj:
            A resource object
        :arg default:
            Returned if no schema for *obj* is found.
        :raises ~jsonapi_view.errors.MetadataUnavailableError:
            If no schema for *obj* is found and no *default* value is given.
        """
        for cls in type(obj).__mro__:
            schema = self._schema_by_resource_class.get(cls)
            if schema is not None:
                return schema

        if default != ARG_DEFAULT:
            return default
        raise MetadataUnavailableError(
            "No schema registered for the class '{}'."\
            .format(type(obj).__name__)
        )

    def type_name(self, obj):
        return self.get_schema(obj).typename

    def fields(self, obj):
        return self._fields_by_schema[self.get_schema(obj)]

    def has_property(self, obj, field):
        schema = self.get_schema(obj)
        return schema.get_field(field.key).has_property(schema, obj)

    def get_value(self, obj, field):
        schema = self.get_schema(obj)
        return schema.get_value(schema.get_field(field.key), obj)
