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
jsonapi_view.ext.sqlalchemy
===========================

Reads the metadata of an object from its SQLAlchemy mapper, so that mapped
classes can be encoded without declaring a
:class:`~jsonapi_view.schema.schema.Schema`:

*   the primary key columns are the identifier fields,
*   the mapped relationships are the associations (``uselist`` decides
    between *to-one* and *to-many*),
*   all other column properties are attributes.

.. code-block:: python3

    introspector = SQLAlchemyIntrospector()
    serializer = ColumnSerializer(introspector, DasherizeNaming())
    handler = JsonApiHandler(introspector, serializer)

Composite primary keys are not supported and raise a
:class:`~jsonapi_view.errors.MissingIdentifierError`.
"""

__all__ = [
    "SQLAlchemyIntrospector",
    "ColumnSerializer"
]

# std
import collections

# third party
import sqlalchemy
from sqlalchemy.orm import ColumnProperty, RelationshipProperty

# local
from jsonapi_view.errors import MetadataUnavailableError
from jsonapi_view.metadata import (
    MetadataIntrospector, FieldMetadata, TO_ONE, TO_MANY
)
from jsonapi_view.naming import IdenticalNaming
from jsonapi_view.schema.fields import field_for_value
from jsonapi_view.serializer import AttributeValueProvider


class SQLAlchemyIntrospector(MetadataIntrospector):
    """
    :arg bool exclude_foreign_keys:
        If true, columns with a foreign key (which are not part of the
        primary key) are hidden. They are usually exposed by a relationship.
    """

    def __init__(self, *, exclude_foreign_keys=True):
        """ """
        self.exclude_foreign_keys = exclude_foreign_keys

        # mapper to field metadata
        self._fields_by_mapper = {}
        return None

    def get_mapper(self, obj):
        """
        Returns the :class:`~sqlalchemy.orm.Mapper` of *obj*.

        :raises ~jsonapi_view.errors.MetadataUnavailableError:
            If *obj* is not an instance of a mapped class.
        """
        state = sqlalchemy.inspect(obj, raiseerr=False)
        mapper = getattr(state, "mapper", None)
        if mapper is None:
            raise MetadataUnavailableError(
                "Could not find a mapper for the class '{}'."\
                .format(type(obj).__name__)
            )
        return mapper

    def _hidden(self, prop):
        if not self.exclude_foreign_keys:
            return False
        return any(
            column.foreign_keys and not column.primary_key\
            for column in prop.columns
        )

    def _mapper_fields(self, mapper):
        fields = list()
        for prop in mapper.iterate_properties:
            if isinstance(prop, RelationshipProperty):
                fields.append(FieldMetadata(
                    key=prop.key, serialized_name="", identifier=False,
                    association=TO_MANY if prop.uselist else TO_ONE
                ))
            elif isinstance(prop, ColumnProperty):
                if self._hidden(prop):
                    continue
                fields.append(FieldMetadata(
                    key=prop.key, serialized_name="",
                    identifier=any(c.primary_key for c in prop.columns),
                    association=None
                ))
        return fields

    def fields(self, obj):
        mapper = self.get_mapper(obj)

        fields = self._fields_by_mapper.get(mapper)
        if fields is None:
            fields = self._fields_by_mapper[mapper] = self._mapper_fields(mapper)
        return fields

    def type_name(self, obj):
        return self.get_mapper(obj).class_.__name__.lower()

    def has_property(self, obj, field):
        return hasattr(obj, field.key)

    def get_value(self, obj, field):
        return getattr(obj, field.key)


class ColumnSerializer(AttributeValueProvider):
    """
    Encodes the column values of a mapped object. The encoder is chosen by
    the type of each value
    (see :func:`~jsonapi_view.schema.fields.field_for_value`).

    :arg SQLAlchemyIntrospector introspector:
    :arg ~jsonapi_view.naming.NamingStrategy naming_strategy:
        Defaults to :class:`~jsonapi_view.naming.IdenticalNaming`.
    """

    def __init__(self, introspector, naming_strategy=None):
        """ """
        super().__init__(naming_strategy or IdenticalNaming())
        self.introspector = introspector
        return None

    def serialize(self, obj):
        d = collections.OrderedDict()
        for field in self.introspector.fields(obj):
            if field.is_association:
                continue

            value = self.introspector.get_value(obj, field)
            name = self.serialized_name(field.key, field.serialized_name)
            d[name] = field_for_value(value).encode(None, value)
        return d
