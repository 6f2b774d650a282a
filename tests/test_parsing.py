"""URL, key=value and media type parsing."""

import pytest

from core.domain.models import KVPair
from core.errors import InvalidUrlError, KVPairParseError, UsageError
from core.parsing import parse_kv_pair, parse_media_type, parse_url


class TestParseUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "http://example.com",
            "https://example.com/path?q=1",
            "http://localhost:8080/",
            "http://127.0.0.1/get",
        ],
    )
    def test_accepts_absolute_http_urls(self, url):
        assert parse_url(url) == url

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "   ",
            "example.com",
            "/relative/path",
            "ftp://example.com/file",
            "mailto:someone@example.com",
            "http://",
        ],
    )
    def test_rejects_invalid_urls(self, url):
        with pytest.raises(InvalidUrlError):
            parse_url(url)

    def test_invalid_url_is_a_usage_error(self):
        with pytest.raises(UsageError) as excinfo:
            parse_url("nope")
        assert "nope" in str(excinfo.value)


class TestParseKVPair:
    def test_simple_pair(self):
        assert parse_kv_pair("name=alice") == KVPair(key="name", value="alice")

    def test_splits_on_first_equals_only(self):
        pair = parse_kv_pair("expr=a=b=c")
        assert pair.key == "expr"
        assert pair.value == "a=b=c"

    @pytest.mark.parametrize("token", ["novalue", "=value", "key=", "=", ""])
    def test_rejects_missing_parts(self, token):
        with pytest.raises(KVPairParseError) as excinfo:
            parse_kv_pair(token)
        assert excinfo.value.token == token

    def test_keeps_whitespace_verbatim(self):
        pair = parse_kv_pair(" a = b ")
        assert pair.key == " a "
        assert pair.value == " b "


class TestParseMediaType:
    @pytest.mark.parametrize(
        "header, expected",
        [
            ("application/json", "application/json"),
            ("application/json; charset=utf-8", "application/json"),
            ("Application/JSON", "application/json"),
            ("text/html;charset=ISO-8859-1", "text/html"),
            ("", None),
            (None, None),
        ],
    )
    def test_normalizes(self, header, expected):
        assert parse_media_type(header) == expected
