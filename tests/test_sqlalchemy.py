import datetime

import pytest

sqlalchemy = pytest.importorskip("sqlalchemy")

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from jsonapi_view.errors import MetadataUnavailableError, MissingIdentifierError
from jsonapi_view.ext.sqlalchemy import ColumnSerializer, SQLAlchemyIntrospector
from jsonapi_view.handler import JsonApiHandler
from jsonapi_view.include import parse_include
from jsonapi_view.naming import DasherizeNaming


Base = declarative_base()


class Writer(Base):
    __tablename__ = "writers"

    id = Column(Integer, primary_key=True)
    full_name = Column(String(80))
    books = relationship("Book", back_populates="writer")


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True)
    title = Column(String(80))
    published_on = Column(Date)
    writer_id = Column(Integer, ForeignKey("writers.id"))
    writer = relationship("Writer", back_populates="books")


class Edition(Base):
    __tablename__ = "editions"

    book_id = Column(Integer, ForeignKey("books.id"), primary_key=True)
    number = Column(Integer, primary_key=True)


@pytest.fixture
def introspector():
    return SQLAlchemyIntrospector()


@pytest.fixture
def handler(introspector):
    return JsonApiHandler(
        introspector, ColumnSerializer(introspector, DasherizeNaming())
    )


@pytest.fixture
def writer():
    book = Book(id=10, title="X", published_on=datetime.date(2016, 1, 1))
    return Writer(id=1, full_name="Ada", books=[book])


def test_fields(introspector, writer):
    fields = {field.key: field for field in introspector.fields(writer)}
    assert set(fields) == {"id", "full_name", "books"}
    assert fields["id"].identifier
    assert fields["books"].to_many
    assert not fields["full_name"].is_association

    fields = {field.key: field for field in introspector.fields(writer.books[0])}
    assert set(fields) == {"id", "title", "published_on", "writer"}
    assert fields["writer"].to_one


def test_foreign_keys_can_be_exposed(writer):
    introspector = SQLAlchemyIntrospector(exclude_foreign_keys=False)
    keys = [field.key for field in introspector.fields(writer.books[0])]
    assert "writer_id" in keys


def test_type_name(introspector, writer):
    assert introspector.type_name(writer) == "writer"
    assert introspector.type_name(writer.books[0]) == "book"


def test_document(handler, writer):
    d = handler.build_document(writer, parse_include(["books"])).to_dict()

    assert d["data"]["type"] == "writer"
    assert d["data"]["attributes"] == {"full-name": "Ada"}
    assert d["data"]["relationships"] == {
        "books": {"data": [{"type": "book", "id": 10}]}
    }
    assert d["included"] == [{
        "type": "book", "id": 10,
        "attributes": {"title": "X", "published-on": "2016-01-01"},
        "relationships": {}
    }]


def test_to_one(handler, writer):
    d = handler.build_document(writer.books).to_dict()
    assert d["data"][0]["relationships"]["writer"] == {
        "data": {"type": "writer", "id": 1}
    }


def test_unmapped_object(introspector):
    with pytest.raises(MetadataUnavailableError):
        introspector.fields(object())


def test_composite_primary_key(handler):
    with pytest.raises(MissingIdentifierError):
        handler.build_document(Edition(book_id=10, number=2))
