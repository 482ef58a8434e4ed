"""Shared fixtures: a small blog domain with authors, posts and comments."""

import pytest

from jsonapi_view.handler import JsonApiHandler
from jsonapi_view.metadata import SchemaIntrospector
from jsonapi_view.schema import base_fields, fields, schema
from jsonapi_view.serializer import SchemaSerializer


class Author(object):

    def __init__(self, id, name, posts=None, mentor=None):
        self.id = id
        self.name = name
        self.posts = posts if posts is not None else []
        self.mentor = mentor
        for post in self.posts:
            post.author = self


class Post(object):

    def __init__(self, id, title, comments=None, author=None):
        self.id = id
        self.title = title
        self.author = author
        self.comments = comments if comments is not None else []


class Comment(object):

    def __init__(self, id, text, author=None):
        self.id = id
        self.text = text
        self.author = author


class AuthorSchema(schema.Schema):
    resource_class = Author

    id = base_fields.Identifier()
    name = fields.String()
    posts = base_fields.ToManyRelationship()
    mentor = base_fields.ToOneRelationship()


class PostSchema(schema.Schema):
    resource_class = Post

    id = base_fields.Identifier()
    title = fields.String()
    author = base_fields.ToOneRelationship()
    comments = base_fields.ToManyRelationship()


class CommentSchema(schema.Schema):
    resource_class = Comment

    id = base_fields.Identifier()
    text = fields.String()
    author = base_fields.ToOneRelationship()


@pytest.fixture
def introspector():
    return SchemaIntrospector([AuthorSchema(), PostSchema(), CommentSchema()])


@pytest.fixture
def serializer(introspector):
    return SchemaSerializer(introspector)


@pytest.fixture
def handler(introspector, serializer):
    return JsonApiHandler(introspector, serializer)


@pytest.fixture
def blog():
    """
    Ada wrote the posts 10 and 11. Bob commented on post 10 and Ada
    answered.
    """
    bob = Author(2, "Bob")
    ada_comment = Comment(100, "Thanks!")
    bob_comment = Comment(101, "Nice post.", author=bob)
    first = Post(10, "X", comments=[bob_comment, ada_comment])
    second = Post(11, "Y")
    ada = Author(1, "Ada", posts=[first, second])
    ada_comment.author = ada
    return {"ada": ada, "bob": bob, "posts": [first, second]}
