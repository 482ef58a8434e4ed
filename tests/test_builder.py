import pytest

from jsonapi_view.builder import ResourceBuilder
from jsonapi_view.document import (
    ResourceDocument, ResourceIdentifier, ToOneRelationship, ToManyRelationship
)
from jsonapi_view.errors import (
    MissingIdentifierError, IdentifierPropertyNotFoundError,
    AttributeLookupMismatchError, NamingStrategyUnavailableError,
    MetadataUnavailableError
)
from jsonapi_view.include import parse_include
from jsonapi_view.metadata import SchemaIntrospector
from jsonapi_view.naming import CamelCaseNaming
from jsonapi_view.schema import base_fields, fields, schema
from jsonapi_view.serializer import SchemaSerializer

from conftest import Author, Post, Comment, PostSchema


class Twin(object):

    def __init__(self):
        self.id = 1
        self.key = "a"


class TwinSchema(schema.Schema):
    resource_class = Twin

    id = base_fields.Identifier()
    key = base_fields.Identifier()


class Nameless(object):
    title = "no id"


class NamelessSchema(schema.Schema):
    resource_class = Nameless

    title = fields.String()


class Ghost(object):
    pass


class GhostSchema(schema.Schema):
    resource_class = Ghost

    uid = base_fields.Identifier()


class Profile(object):

    def __init__(self, id, first_name, best_friend=None):
        self.id = id
        self.first_name = first_name
        self.best_friend = best_friend


class ProfileSchema(schema.Schema):
    resource_class = Profile
    type = "profiles"

    id = base_fields.Identifier()
    first_name = fields.String()
    best_friend = base_fields.ToOneRelationship()
    nickname = fields.String(name="alias")

    @nickname.getter
    def nickname(self, profile):
        return profile.first_name.lower()


@pytest.fixture
def builder(introspector, serializer):
    return ResourceBuilder(introspector, serializer)


def build(builder, obj, included=None, include_relationships=None):
    document = ResourceDocument()
    resource = builder.build_resource_object(
        document, obj, included, include_relationships
    )
    document.set_data(resource)
    return document, resource


def test_build_identifier(builder, blog):
    identifier = builder.build_identifier(blog["ada"])
    assert identifier == ResourceIdentifier(type="author", id=1)
    assert identifier.to_dict() == {"type": "author", "id": 1}
    assert builder.build_identifier(blog["ada"]) == identifier


def test_build_identifier_of_none(builder):
    assert builder.build_identifier(None) is None


def test_attribute_and_relationship_count(builder, blog):
    _, resource = build(builder, blog["ada"])

    # 4 fields, 1 identifier, 2 associations
    assert list(resource.attributes.keys()) == ["name"]
    assert list(resource.relationships.keys()) == ["posts", "mentor"]
    assert "id" not in resource.attributes
    assert resource.type == "author"
    assert resource.id == 1


def test_empty_to_one(builder, blog):
    _, resource = build(builder, blog["ada"])

    mentor = resource.relationships["mentor"]
    assert isinstance(mentor, ToOneRelationship)
    assert mentor.data is None
    assert mentor.to_dict() == {"data": None}


def test_to_one(builder, blog):
    _, resource = build(builder, blog["posts"][0])

    author = resource.relationships["author"]
    assert isinstance(author, ToOneRelationship)
    assert author.data == ResourceIdentifier(type="author", id=1)


def test_to_many_keeps_order(builder, blog):
    _, resource = build(builder, blog["posts"][0])

    comments = resource.relationships["comments"]
    assert isinstance(comments, ToManyRelationship)
    assert comments.to_dict() == {"data": [
        {"type": "comment", "id": 101},
        {"type": "comment", "id": 100}
    ]}


def test_empty_to_many_is_a_list(builder, blog):
    _, resource = build(builder, blog["bob"])
    posts = resource.relationships["posts"]
    assert isinstance(posts, ToManyRelationship)
    assert posts.data == []


def test_cardinality_comes_from_metadata(builder):
    # A to-many relationship with a single element is still a list.
    post = Post(10, "X", comments=[Comment(100, "Hi")])
    _, resource = build(builder, post)
    assert isinstance(resource.relationships["comments"], ToManyRelationship)


def test_nothing_included_without_scope(builder, blog):
    document, _ = build(builder, blog["ada"])
    assert document.included == []


def test_included(builder, blog):
    document, resource = build(
        builder, blog["ada"], parse_include(["posts.comments"])
    )

    # The included resources of a relationship come before the resource.
    assert [(r.type, r.id) for r in document.included] == [
        ("comment", 101), ("comment", 100), ("post", 10), ("post", 11)
    ]

    first_post = document.included[2]
    assert list(first_post.relationships.keys()) == ["comments"]

    comment = document.included[0]
    assert comment.attributes == {"text": "Nice post."}
    assert comment.relationships == {}


def test_allow_list_prunes_relationships(builder, blog):
    _, resource = build(builder, blog["ada"], None, ["posts"])
    assert list(resource.relationships.keys()) == ["posts"]
    assert list(resource.attributes.keys()) == ["name"]

    _, resource = build(builder, blog["ada"], None, [])
    assert resource.relationships == {}


def test_included_to_one_target_none_is_skipped(builder):
    post = Post(12, "Orphan")
    document, resource = build(builder, post, parse_include(["author"]))
    assert resource.relationships["author"].data is None
    assert document.included == []


def test_none_elements_of_to_many_are_skipped(builder):
    post = Post(12, "Sparse", comments=[None, Comment(100, "Hi"), None])
    document, resource = build(builder, post, parse_include(["comments"]))

    assert resource.relationships["comments"].data \
        == [ResourceIdentifier(type="comment", id=100)]
    assert resource.relationships["comments"].to_dict() \
        == {"data": [{"type": "comment", "id": 100}]}
    assert [r.id for r in document.included] == [100]


def test_error_pointer_after_none_element():
    introspector = SchemaIntrospector([PostSchema(), GhostSchema()])
    builder = ResourceBuilder(introspector, SchemaSerializer(introspector))
    post = Post(12, "Sparse", comments=[None, Ghost()])

    with pytest.raises(IdentifierPropertyNotFoundError) as excinfo:
        build(builder, post)
    assert excinfo.value.source_pointer.path \
        == "/data/relationships/comments/data/0"


def test_getter_and_naming_strategy():
    introspector = SchemaIntrospector([ProfileSchema()])
    serializer = SchemaSerializer(introspector, CamelCaseNaming())
    builder = ResourceBuilder(introspector, serializer)

    bob = Profile(2, "Bob")
    ada = Profile(1, "Ada", best_friend=bob)
    document, resource = build(builder, ada, parse_include(["bestFriend"]))

    assert resource.type == "profiles"
    assert resource.attributes == {"firstName": "Ada", "alias": "ada"}
    assert resource.relationships["bestFriend"].data \
        == ResourceIdentifier(type="profiles", id=2)
    assert [r.id for r in document.included] == [2]


def test_two_identifiers():
    introspector = SchemaIntrospector([TwinSchema()])
    builder = ResourceBuilder(introspector, SchemaSerializer(introspector))

    document = ResourceDocument()
    with pytest.raises(MissingIdentifierError):
        builder.build_resource_object(document, Twin())
    assert document.data is None
    assert document.included == []


def test_no_identifier():
    introspector = SchemaIntrospector([NamelessSchema()])
    builder = ResourceBuilder(introspector, SchemaSerializer(introspector))

    with pytest.raises(MissingIdentifierError):
        builder.build_identifier(Nameless())


def test_identifier_property_not_found():
    introspector = SchemaIntrospector([GhostSchema()])
    builder = ResourceBuilder(introspector, SchemaSerializer(introspector))

    with pytest.raises(IdentifierPropertyNotFoundError):
        builder.build_identifier(Ghost())


def test_metadata_unavailable(builder):
    with pytest.raises(MetadataUnavailableError):
        builder.build_identifier(object())


def test_metadata_unavailable_for_related_object(builder):
    post = Post(10, "X", author=object())
    with pytest.raises(MetadataUnavailableError):
        build(builder, post)


def test_attribute_lookup_mismatch(introspector):

    class ForgetfulSerializer(SchemaSerializer):

        def serialize(self, obj):
            d = super().serialize(obj)
            d.pop("title", None)
            return d

    builder = ResourceBuilder(
        introspector, ForgetfulSerializer(introspector)
    )
    with pytest.raises(AttributeLookupMismatchError) as excinfo:
        build(builder, Post(10, "X"))
    assert excinfo.value.source_pointer.path == "/data/attributes/title"


def test_error_pointer_of_included_resource():
    introspector = SchemaIntrospector([AuthorSchemaWithoutPosts(), TwinSchema()])
    builder = ResourceBuilder(introspector, SchemaSerializer(introspector))

    author = Author(1, "Ada")
    author.mentor = Twin()
    with pytest.raises(MissingIdentifierError) as excinfo:
        build(builder, author)
    assert excinfo.value.source_pointer.path == "/data/relationships/mentor/data"


def test_naming_strategy_unavailable(introspector):
    serializer = SchemaSerializer(introspector)
    serializer.naming_strategy = None
    builder = ResourceBuilder(introspector, serializer)

    with pytest.raises(NamingStrategyUnavailableError):
        build(builder, Post(10, "X"))


class AuthorSchemaWithoutPosts(schema.Schema):
    resource_class = Author

    id = base_fields.Identifier()
    name = fields.String()
    mentor = base_fields.ToOneRelationship()
