import pytest

from encoder import Headers


@pytest.fixture(scope="function")
def headers() -> Headers:
    return Headers([("Content-Type", "application/json"), ("Content-Length", "42")])


def test_headers_original_name(headers: Headers):
    assert headers["Content-Type"] == "application/json"


def test_headers_lowercased_name(headers: Headers):
    assert headers["content-type"] == "application/json"
    assert headers.get("CONTENT-LENGTH") == "42"


def test_headers_contains(headers: Headers):
    assert "Content-Length" in headers
    assert "content-length" in headers
    assert "bar" not in headers
    assert 42 not in headers


def test_headers_missing_key(headers: Headers):
    with pytest.raises(KeyError):
        headers["bar"]
    assert headers.get("bar") is None


def test_headers_iteration_keeps_casing(headers: Headers):
    assert list(headers) == ["Content-Type", "Content-Length"]
    assert dict(headers) == {"Content-Type": "application/json", "Content-Length": "42"}
    assert len(headers) == 2


def test_headers_equality(headers: Headers):
    assert headers == {"content-type": "application/json", "content-length": "42"}
    assert headers != {"content-type": "application/json"}


def test_headers_are_read_only(headers: Headers):
    with pytest.raises(TypeError):
        headers["Content-Type"] = "text/plain"  # type: ignore[index]
