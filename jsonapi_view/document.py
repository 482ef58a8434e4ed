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
jsonapi_view.document
=====================

This module contains the building blocks of a JSON API document:

*   :class:`ResourceIdentifier`

    :seealso: http://jsonapi.org/format/#document-resource-identifier-objects

*   :class:`ResourceObject`

    :seealso: http://jsonapi.org/format/#document-resource-objects

*   :class:`ToOneRelationship`, :class:`ToManyRelationship`

    :seealso: http://jsonapi.org/format/#document-resource-object-relationships

*   :class:`ResourceDocument`, :class:`CollectionDocument`

    :seealso: http://jsonapi.org/format/#document-top-level

All of them are filled by the :class:`~jsonapi_view.builder.ResourceBuilder`
and converted with :meth:`to_dict` into a structure, which can be serialized
with :func:`json.dumps`.
"""

__all__ = [
    "ResourceIdentifier",
    "ResourceObject",
    "Relationship",
    "ToOneRelationship",
    "ToManyRelationship",
    "Document",
    "ResourceDocument",
    "CollectionDocument"
]

# std
import collections

# local
from . import version


class ResourceIdentifier(collections.namedtuple(
        "ResourceIdentifier", ["type", "id"]
    )):
    """
    A resource identifier object:

    .. code-block:: python3

        >>> ResourceIdentifier(type="people", id=42).to_dict()
        {"type": "people", "id": 42}
    """

    __slots__ = ()

    def to_dict(self):
        return {"type": self.type, "id": self.id}


class ResourceObject(object):
    """
    A resource object with its attributes and relationships.

    :arg str type:
    :arg id:
    """

    def __init__(self, type, id):
        """ """
        self.type = type
        self.id = id

        #: Maps the serialized name of an attribute to its encoded value.
        self.attributes = collections.OrderedDict()

        #: Maps the serialized name of a relationship to the
        #: :class:`Relationship`.
        self.relationships = collections.OrderedDict()
        return None

    def __repr__(self):
        return "ResourceObject(type={!r}, id={!r})".format(self.type, self.id)

    @property
    def identifier(self):
        """The :class:`ResourceIdentifier` of this resource."""
        return ResourceIdentifier(type=self.type, id=self.id)

    def set_attribute(self, name, value):
        self.attributes[name] = value
        return None

    def set_relationship(self, name, relationship):
        self.relationships[name] = relationship
        return None

    def to_dict(self):
        d = collections.OrderedDict()
        d["id"] = self.id
        d["type"] = self.type
        d["attributes"] = dict(self.attributes)
        d["relationships"] = {
            name: relationship.to_dict()\
            for name, relationship in self.relationships.items()
        }
        return d


class Relationship(object):
    """
    The common base of :class:`ToOneRelationship` and
    :class:`ToManyRelationship`. A relationship only contains resource
    identifiers, never the related resource objects themselves.
    """

    def to_dict(self):
        raise NotImplementedError()


class ToOneRelationship(Relationship):
    """
    :arg ResourceIdentifier data:
        The identifier of the related resource or *None*, if the relationship
        is empty.
    """

    def __init__(self, data=None):
        """ """
        self.data = data
        return None

    def to_dict(self):
        return {"data": self.data.to_dict() if self.data is not None else None}


class ToManyRelationship(Relationship):
    """
    :arg list data:
        A list with the identifiers of the related resources.
    """

    def __init__(self, data=None):
        """ """
        self.data = list(data or [])
        return None

    def add_data(self, identifier):
        self.data.append(identifier)
        return None

    def to_dict(self):
        return {"data": [identifier.to_dict() for identifier in self.data]}


class Document(object):
    """
    The base of all documents. It owns the list of the *included* resources,
    which is filled while the primary data is built.

    :arg bool deduplicate:
        If true, a resource is only added once to the included resources,
        even if it is reachable by different relationship paths.
    :arg bool jsonapi_object:
        If true, the top level *jsonapi* object with the version is added.
    """

    def __init__(self, *, deduplicate=False, jsonapi_object=False):
        """ """
        self.included = list()
        self.deduplicate = deduplicate
        self.jsonapi_object = jsonapi_object

        # The identifiers of all included resources.
        self._included_ids = set()
        return None

    def add_included(self, resource):
        """
        Appends the :class:`ResourceObject` *resource* to the included
        resources.

        :rtype: bool
        :returns: True, if the resource has been added.
        """
        if self.deduplicate:
            if resource.identifier in self._included_ids:
                return False
            self._included_ids.add(resource.identifier)

        self.included.append(resource)
        return True

    def encode_data(self):
        raise NotImplementedError()

    def to_dict(self):
        d = collections.OrderedDict()
        d["data"] = self.encode_data()
        d["included"] = [resource.to_dict() for resource in self.included]
        if self.jsonapi_object:
            d["jsonapi"] = {"version": version.jsonapi_version}
        return d


class ResourceDocument(Document):
    """
    A document whose primary data is a single resource object.
    """

    def __init__(self, data=None, **kargs):
        """ """
        super().__init__(**kargs)
        self.data = data
        return None

    def set_data(self, resource):
        self.data = resource
        return None

    def encode_data(self):
        return self.data.to_dict() if self.data is not None else None


class CollectionDocument(Document):
    """
    A document whose primary data is a list of resource objects.
    """

    def __init__(self, data=None, **kargs):
        """ """
        super().__init__(**kargs)
        self.data = list(data or [])
        return None

    def add_data(self, resource):
        self.data.append(resource)
        return None

    def encode_data(self):
        return [resource.to_dict() for resource in self.data]
