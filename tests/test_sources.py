from unittest import mock

import pytest
import requests

from maketext import sources
from maketext.sources import SourceError, UnknownMethodError, load_text, read_file, read_url


def fake_response(text="", status=200, content_type="text/plain; charset=utf-8"):
    resp = requests.Response()
    resp.status_code = status
    resp._content = text.encode("utf-8")
    resp.headers["Content-Type"] = content_type
    resp.url = "http://example.com"
    return resp


def test_read_file(tmp_path):
    p = tmp_path / "corpus.txt"
    p.write_text("the cat in the hat\n", encoding="utf-8")
    assert read_file(p) == "the cat in the hat\n"


def test_read_file_missing(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(SourceError) as exc:
        read_file(missing)
    assert str(exc.value).startswith(f"Cannot read file: {missing}:")


def test_read_url():
    with mock.patch.object(sources.requests, "get", return_value=fake_response("the cat")) as get:
        assert read_url("http://example.com") == "the cat"
    get.assert_called_once_with("http://example.com", timeout=sources.FETCH_TIMEOUT)


def test_read_url_without_charset_decodes_utf8():
    resp = fake_response("café crème", content_type="text/plain")
    with mock.patch.object(sources.requests, "get", return_value=resp):
        assert read_url("http://example.com") == "café crème"


def test_read_url_http_error():
    with mock.patch.object(sources.requests, "get", return_value=fake_response(status=404)):
        with pytest.raises(SourceError) as exc:
            read_url("http://example.com")
    assert str(exc.value).startswith("Cannot read URL: http://example.com:")


def test_read_url_connection_error():
    boom = requests.ConnectionError("connection refused")
    with mock.patch.object(sources.requests, "get", side_effect=boom):
        with pytest.raises(SourceError) as exc:
            read_url("http://example.com")
    assert "connection refused" in str(exc.value)


def test_load_text_dispatches(tmp_path):
    p = tmp_path / "corpus.txt"
    p.write_text("a b c", encoding="utf-8")
    assert load_text("file", str(p)) == "a b c"

    with mock.patch.object(sources.requests, "get", return_value=fake_response("x y z")):
        assert load_text("url", "http://example.com") == "x y z"


def test_load_text_unknown_method():
    with pytest.raises(UnknownMethodError) as exc:
        load_text("ftp", "whatever")
    assert str(exc.value) == "Unknown method: ftp"
