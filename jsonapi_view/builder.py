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
jsonapi_view.builder
====================

The :class:`ResourceBuilder` converts a domain object into a JSON API
:class:`~jsonapi_view.document.ResourceObject`. It queries a
:class:`~jsonapi_view.metadata.MetadataIntrospector` for the identifier and
the relationships of the object and an
:class:`~jsonapi_view.serializer.AttributeValueProvider` for the serialized
attribute values.

Related objects are only converted into
:class:`resource identifiers <jsonapi_view.document.ResourceIdentifier>`,
unless the relationship is part of the inclusion scope. In this case the
related objects are built recursively and added to the *included* resources
of the document:

.. code-block:: python3

    builder = ResourceBuilder(introspector, serializer)

    document = ResourceDocument()
    document.set_data(builder.build_resource_object(
        document, article, parse_include(["author.posts"])
    ))
"""

__all__ = [
    "ResourceBuilder"
]

# third party
from jsonpointer import JsonPointer

# local
from .document import (
    ResourceIdentifier, ResourceObject, ToOneRelationship, ToManyRelationship
)
from .errors import (
    MissingIdentifierError, IdentifierPropertyNotFoundError,
    AttributeLookupMismatchError
)
from .include import EMPTY_SCOPE


def child_pointer(sp, *parts):
    """
    Returns a new :class:`~jsonpointer.JsonPointer`, which points to the
    member *parts* below *sp*.
    """
    return JsonPointer.from_parts(sp.parts + [str(part) for part in parts])


class ResourceBuilder(object):
    """
    Builds resource identifiers and resource objects.

    :arg ~jsonapi_view.metadata.MetadataIntrospector introspector:
    :arg ~jsonapi_view.serializer.AttributeValueProvider serializer:
    """

    def __init__(self, introspector, serializer):
        """ """
        self.introspector = introspector
        self.serializer = serializer
        return None

    def resource_info(self, obj, sp=None):
        """
        Returns a three tuple with the identifier field, the encoded id and
        the type of *obj*.

        :arg obj:
        :arg ~jsonpointer.JsonPointer sp:
            Points to the resource in the output document. Only used for the
            error messages.

        :raises ~jsonapi_view.errors.MissingIdentifierError:
        :raises ~jsonapi_view.errors.IdentifierPropertyNotFoundError:
        """
        identifiers = self.introspector.identifier_fields(obj)
        if len(identifiers) != 1:
            raise MissingIdentifierError(
                "The object must contain exactly one identifier member, "\
                "'{}' has {}.".format(type(obj).__name__, len(identifiers)),
                source_pointer=sp
            )

        field = identifiers[0]
        if not self.introspector.has_property(obj, field):
            raise IdentifierPropertyNotFoundError(
                "Identifier member '{}' not found in object."\
                .format(field.key),
                source_pointer=sp
            )

        id_value = self.serializer.encode_id(
            obj, self.introspector.get_value(obj, field)
        )
        typename = self.introspector.type_name(obj)
        return (field, id_value, typename)

    def build_identifier(self, obj, sp=None):
        """
        Returns the :class:`~jsonapi_view.document.ResourceIdentifier` of
        *obj* or *None*, if *obj* is *None*.
        """
        if obj is None:
            return None

        _, id_value, typename = self.resource_info(obj, sp)
        return ResourceIdentifier(type=typename, id=id_value)

    def build_resource_object(
            self, document, obj, included=None, include_relationships=None,
            *, sp=None
        ):
        """
        Builds the resource object of *obj*. Related objects, which are part
        of the inclusion scope, are built recursively and appended to the
        included resources of the *document*.

        :arg ~jsonapi_view.document.Document document:
            The document, which receives the included resources.
        :arg obj:
            The domain object
        :arg included:
            The current inclusion scope (a nested mapping). *None* means,
            that no relationship is included.
        :arg include_relationships:
            *None* or a list with the serialized names of all relationships,
            which may appear in the resource object. Relationships not in this
            list are skipped.
        :arg ~jsonpointer.JsonPointer sp:
            Points to the resource (or its linkage) in the output document.
            Only used for the error messages.

        :rtype: ~jsonapi_view.document.ResourceObject
        """
        sp = sp if sp is not None else JsonPointer("/data")
        included = included if included is not None else EMPTY_SCOPE

        _, id_value, typename = self.resource_info(obj, sp)
        resource = ResourceObject(typename, id_value)

        # Reading the serialized values ensures, that all serializer settings
        # are respected before the data is shaped into a resource object.
        serialized = self.serializer.serialize(obj)

        for field in self.introspector.fields(obj):
            # Identifiers are neither attributes nor relationships.
            if field.identifier:
                continue

            name = self.serializer.serialized_name(
                field.key, field.serialized_name
            )

            if not field.is_association:
                if name not in serialized:
                    raise AttributeLookupMismatchError(
                        "Unable to read property '{}'.".format(name),
                        source_pointer=child_pointer(sp, "attributes", name)
                    )
                resource.set_attribute(name, serialized[name])
                continue

            if include_relationships is not None \
                and name not in include_relationships:
                continue

            field_sp = child_pointer(sp, "relationships", name, "data")
            if field.to_one:
                relationship = self._build_to_one(
                    document, obj, field, name, included, field_sp
                )
            else:
                relationship = self._build_to_many(
                    document, obj, field, name, included, field_sp
                )
            resource.set_relationship(name, relationship)
        return resource

    def _build_to_one(self, document, obj, field, name, included, sp):
        related = self.introspector.get_value(obj, field)

        relationship = ToOneRelationship(self.build_identifier(related, sp))
        if name in included and related is not None:
            self._include(document, related, included[name], sp)
        return relationship

    def _build_to_many(self, document, obj, field, name, included, sp):
        relationship = ToManyRelationship()

        related = self.introspector.get_value(obj, field) or []
        for relative in related:
            # A resource linkage array never contains null.
            if relative is None:
                continue

            relative_sp = child_pointer(sp, len(relationship.data))
            relationship.add_data(self.build_identifier(relative, relative_sp))

            if name in included:
                self._include(document, relative, included[name], relative_sp)
        return relationship

    def _include(self, document, related, subscope, sp):
        """
        Builds the resource object of the *related* object and adds it to the
        included resources. The *subscope* is used as inclusion scope and as
        list of the allowed relationships.
        """
        resource = self.build_resource_object(
            document, related, subscope, list(subscope.keys()), sp=sp
        )
        document.add_included(resource)
        return None
