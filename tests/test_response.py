import httpx
import pytest

from swretail.services.response import Response


def make_response(content: bytes, status: int = 200) -> Response:
    request = httpx.Request("GET", "https://api.example.com/v1/items")
    return Response(httpx.Response(status, content=content, request=request))


@pytest.mark.parametrize(
    "content, expected",
    [
        (b'{"id": 7, "tags": ["a", "b"]}', {"id": 7, "tags": ["a", "b"]}),
        (b"[1, 2, 3]", [1, 2, 3]),
        (b'"plain"', "plain"),
        (b"42", 42),
    ],
)
def test_valid_json_body_is_parsed(content, expected):
    response = make_response(content)
    assert response.json == expected


@pytest.mark.parametrize(
    "content",
    [
        b"",
        b"{not json",
        b"<html></html>",
        b"\xff\xff\xff",
        b"NaN",
        b"-Infinity",
        b'{"price": Infinity}',
    ],
)
def test_malformed_or_empty_body_leaves_json_unset(content):
    response = make_response(content)
    assert response.json is None
    assert response.content == content


def test_exposes_status_and_headers():
    request = httpx.Request("GET", "https://api.example.com/v1/items")
    raw = httpx.Response(
        201, content=b"{}", headers={"X-Request-Id": "abc"}, request=request
    )
    response = Response(raw)
    assert response.status_code == 201
    assert response.headers["x-request-id"] == "abc"
    assert response.ok is True
    assert response.url == "https://api.example.com/v1/items"
    assert response.raw is raw


def test_response_is_immutable():
    response = make_response(b'{"a": 1}')
    with pytest.raises(AttributeError):
        response.json = {"a": 2}
    assert response.json == {"a": 1}


def test_get_reads_object_fields_only():
    assert make_response(b'{"status": "ok"}').get("status") == "ok"
    assert make_response(b'{"status": "ok"}').get("missing", "x") == "x"
    assert make_response(b'["status"]').get("status") is None


def test_deeply_nested_body_leaves_json_unset():
    response = make_response(b"[" * 200000)
    assert response.json is None
    assert response.status_code == 200


def test_body_is_parsed_only_at_construction():
    response = make_response(b'{"a": 1}')
    assert not hasattr(response, "parse_json_body")
    assert response.json is response.json
