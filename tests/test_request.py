from jsonapi_view.request import Request
from jsonapi_view.response import Response


def test_query_argument():
    request = Request("/api/articles?included=author,comments&included=tags")
    assert request.parsed_uri.path == "/api/articles"
    assert request.get_query_argument("included") == "tags"
    assert request.get_query_argument("sort") is None
    assert request.get_query_argument("sort", "") == ""


def test_blank_query_argument():
    request = Request("/api/articles?included=")
    assert request.get_query_argument("included", "x") == ""


def test_response_defaults():
    response = Response()
    assert response.status == 200
    assert response.headers == {}
    assert response.body == b""
