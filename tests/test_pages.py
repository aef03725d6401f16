"""
Tests for the shared routing table in hello_server.core.pages.
"""
import json

import pytest

from hello_server.core import pages
from hello_server.core.pages import (
    ROUTES,
    TIME_JSON,
    NOT_FOUND_BODY,
    clean_path,
    dispatch,
    handle_about,
    handle_home,
    handle_time,
    redirect_location,
)


class TestHandlers:
    """Each handler is a pure function of the path"""

    def test_home_at_root(self):
        status, content_type, body = handle_home("/")
        assert status == 200
        assert content_type == "text/html"
        assert "Hello, World" in body
        assert 'href="/about"' in body
        assert 'href="/api/time"' in body

    @pytest.mark.parametrize("path", ["/xyz", "/index.html", "/about/", "/api", ""])
    def test_home_rejects_other_paths(self, path):
        status, content_type, body = handle_home(path)
        assert status == 404
        assert content_type == "text/plain; charset=utf-8"
        assert body == NOT_FOUND_BODY

    def test_about(self):
        status, content_type, body = handle_about("/about")
        assert status == 200
        assert content_type == "text/html"
        assert "About This Server" in body
        assert 'href="/"' in body

    def test_time_is_static_literal(self):
        status, content_type, body = handle_time("/api/time")
        assert status == 200
        assert content_type == "application/json"
        assert body == '{"message": "Current time from Go server", "status": "success"}'
        assert json.loads(body) == {"message": "Current time from Go server", "status": "success"}

    def test_time_does_not_change(self):
        assert handle_time("/api/time") == handle_time("/api/time")


class TestDispatch:
    """Exact-match routing with the root handler as fallback"""

    def test_routing_table_is_fixed(self):
        assert set(ROUTES) == {"/", "/about", "/api/time"}
        with pytest.raises(TypeError):
            ROUTES["/new"] = handle_home

    @pytest.mark.parametrize("path,expected_status", [
        ("/", 200),
        ("/about", 200),
        ("/api/time", 200),
        ("/xyz", 404),
        ("/about/", 404),
        ("/api/time/", 404),
        ("/api/time/now", 404),
        ("/ABOUT", 404),
    ])
    def test_status_by_path(self, path, expected_status):
        status, _, _ = dispatch(path)
        assert status == expected_status

    def test_time_body(self):
        assert dispatch("/api/time")[2] == TIME_JSON

    def test_unknown_path_uses_root_handler(self, monkeypatch):
        calls = []

        def fake_home(path):
            calls.append(path)
            return pages.NOT_FOUND

        monkeypatch.setattr(pages, "handle_home", fake_home)
        dispatch("/missing")
        assert calls == ["/missing"]


class TestCleanPath:
    """Canonical path form used for redirects"""

    @pytest.mark.parametrize("raw,cleaned", [
        ("", "/"),
        ("/", "/"),
        ("about", "/about"),
        ("/about", "/about"),
        ("//about", "/about"),
        ("///about", "/about"),
        ("/api//time", "/api/time"),
        ("/api/./time", "/api/time"),
        ("/api/x/../time", "/api/time"),
        ("/..", "/"),
        ("/about/", "/about/"),
        ("/about//", "/about/"),
    ])
    def test_clean_path(self, raw, cleaned):
        assert clean_path(raw) == cleaned

    def test_canonical_path_has_no_redirect(self):
        assert redirect_location("/about") is None
        assert redirect_location("/about/") is None
        assert redirect_location("/") is None

    def test_redirect_location(self):
        assert redirect_location("//about") == "/about"
        assert redirect_location("/api//time", "a=1&b=2") == "/api/time?a=1&b=2"

    def test_redirect_location_escapes_control_characters(self):
        """A decoded CR/LF can never reach the Location header"""
        location = redirect_location("/x\r\nSet-Cookie: a=1//y")
        assert location == "/x%0D%0ASet-Cookie:%20a=1/y"
        assert "\r" not in location and "\n" not in location

    def test_redirect_location_encodes_non_ascii(self):
        location = redirect_location("/€//x")
        assert location == "/%E2%82%AC/x"
        location.encode("ascii")

    def test_redirect_location_escapes_decoded_delimiters(self):
        """'%', '?' and '#' decoded from the path stay part of the path"""
        assert redirect_location("/100%//x") == "/100%25/x"
        assert redirect_location("/a?b//c") == "/a%3Fb/c"
        assert redirect_location("/a#b//c") == "/a%23b/c"

    def test_redirect_location_keeps_encoded_query(self):
        assert redirect_location("//about", "q=a%20b&x=%E2%82%AC") == "/about?q=a%20b&x=%E2%82%AC"
