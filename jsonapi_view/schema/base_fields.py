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
jsonapi_view.schema.base_fields
===============================

This module contains the definition for all basic fields. A field describes
a property of a resource class and how its value is read and encoded for the
JSON API document.

You should only work with the following fields directly:

*   :class:`Identifier`

    The property which holds the *id* of the resource. Exactly one identifier
    must be defined per schema.

    :seealso: http://jsonapi.org/format/#document-resource-object-identification

*   :class:`Attribute`

    Represent information about a resource object (but not a relationship).

    :seealso: http://jsonapi.org/format/#document-resource-object-attributes

*   :class:`ToOneRelationship`, :class:`ToManyRelationship`

    Represent relationships on a resource object.

    :seealso: http://jsonapi.org/format/#document-resource-object-relationships
"""

__all__ = [
    "BaseField",
    "Identifier",
    "Attribute",
    "Relationship",
    "ToOneRelationship",
    "ToManyRelationship"
]


class BaseField(object):
    """
    This class describes the base for all fields defined on a schema and
    knows how to read and encode the field. A field is usually directly
    mapped to a property (*mapped_key*) on the resource object, but this
    mapping can be customized by implementing a custom *getter*.

    .. hint::

        The inheritance of fields is implemented using the
        :func:`~copy.deepcopy` function from the standard library. This means,
        that in some rare cases, it is necessairy that you implement a
        custom :meth:`__deepcopy__` method when you subclass :class:`BaseField`.

    :arg str name:
        The serialized name of the field in the JSON API document. If not
        explicitly given, the naming strategy of the serializer translates the
        :attr:`key` into the serialized name.
    :arg str mapped_key:
        The name of the associated property on the resource class. If not
        explicitly given, it's the same as :attr:`key`.
    :arg callable fget:
        A method on a :class:`~jsonapi_view.schema.schema.Schema` which
        returns the current value of the resource's property:
        ``fget(self, resource)``.
    """

    #: True, if the field holds the id of the resource.
    identifier = False

    #: True, if this is to-one relationship.
    to_one = False

    #: True, if this is a to-many relationship.
    to_many = False

    def __init__(self, *, name="", mapped_key="", fget=None):
        """ """
        #: The name of this field on the
        #: :class:`~jsonapi_view.schema.schema.Schema` it has been defined on.
        self.key = None

        self.name = name
        self.mapped_key = mapped_key
        self.fget = fget
        return None

    def __call__(self, f):
        """The same as :meth:`getter`."""
        return self.getter(f)

    def __repr__(self):
        return "{}(key={!r}, name={!r})".format(
            type(self).__name__, self.key, self.name
        )

    @property
    def is_association(self):
        return self.to_one or self.to_many

    def getter(self, f):
        """
        Descriptor to change the getter:

        .. code-block:: python3

            class ArticleSchema(Schema):

                title = Attribute()

                @title.getter
                def title(self, article):
                    return article.title.upper()
        """
        self.fget = f
        return self

    def default_get(self, schema, resource):
        """Used if no *getter* has been defined. Can be overridden."""
        return getattr(resource, self.mapped_key)

    def get(self, schema, resource):
        """
        Returns the value of the field on the resource.

        :arg ~jsonapi_view.schema.schema.Schema schema:
            The schema this field has been defined on.
        """
        f = self.fget or self.default_get
        return f(schema, resource)

    def has_property(self, schema, resource):
        """
        Returns true, if the value of the field can be read from *resource*.
        Fields with a custom *getter* are always readable.
        """
        if self.fget is not None:
            return True
        return hasattr(resource, self.mapped_key)

    def encode(self, schema, data):
        """Encodes the *data* returned from :meth:`get` so that it can be
        serialized with :func:`json.dumps`. Can be overridden.
        """
        return data


class Identifier(BaseField):
    r"""
    .. seealso::

        http://jsonapi.org/format/#document-resource-object-identification

    The field, which holds the *id* of the resource. The id is never part of
    the resource's attributes object.

    .. code-block:: python3

        class ArticleSchema(Schema):

            id = Identifier()

    :arg \*\*kargs:
        The init arguments for the :class:`BaseField`.
    """

    identifier = True


class Attribute(BaseField):
    r"""
    .. seealso::

        http://jsonapi.org/format/#document-resource-object-attributes

    An attribute is always part of the resource's JSON API attributes object.

    Per default, an attribute is mapped to a property on the resource object.
    You can customize this behaviour by implementing your own *getter*:

    .. code-block:: python3

        class Article(Schema):

            title = Attribute()

    Does the same as:

    .. code-block:: python3

        class Article(Schema):

            title = Attribute()

            @title.getter
            def title(self, article):
                return article.title

    :arg \*\*kargs:
        The init arguments for the :class:`BaseField`.
    """


class Relationship(BaseField):
    """
    .. seealso::

        http://jsonapi.org/format/#document-resource-object-relationships

    The common base of *to-one* and *to-many* relationships. A relationship
    is never part of the attributes object. The value returned by :meth:`get`
    is the related resource (or the related resources) itself, not its
    encoded representation.

    :seealso: :class:`ToOneRelationship`, :class:`ToManyRelationship`
    """


class ToOneRelationship(Relationship):
    """
    .. seealso::

        http://jsonapi.org/format/#document-resource-object-relationships

    Describes how to read a *to-one* relationship. :meth:`get` must return
    the related resource or *None*.
    """

    to_one = True


class ToManyRelationship(Relationship):
    """
    .. seealso::

        http://jsonapi.org/format/#document-resource-object-relationships

    Describes how to read a *to-many* relationship. :meth:`get` must return
    an iterable with the related resources. *None* is treated as an empty
    relationship.
    """

    to_many = True

    def get(self, schema, resource):
        related = super().get(schema, resource)
        return list(related) if related is not None else []
