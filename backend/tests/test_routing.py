"""
LinkVault Backend — Routing, Pages and Route Helper Tests
===========================================================

What:  Tests for how requests are dispatched: literal routes before `{id}`,
       plain-text 404/405 bodies, the index page and static assets, plus
       the integer parsing shared by path and query ids.
"""

import pytest

from linkvault.routes.common import parse_int64
from linkvault.routes.pages import render_index


class TestParseInt64:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0", 0),
            ("42", 42),
            ("+7", 7),
            ("-3", -3),
            ("007", 7),
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
        ],
    )
    def test_valid_integers(self, raw, expected):
        assert parse_int64(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", " 1", "1 ", "1\n", "1.0", "0x10", "abc", "9223372036854775808", "١٢"],
    )
    def test_invalid_integers(self, raw):
        assert parse_int64(raw) is None


class TestRouteDispatch:
    """Literal paths win over `{id}`; misses are plain text."""

    @pytest.mark.asyncio
    async def test_reorder_is_not_parsed_as_an_id(self, test_client, auth):
        response = await test_client.post(
            "/api/categories/reorder", params=auth, json={"ids": []}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Categories reordered"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [
            ("GET", "/api/categories/5"),
            ("PATCH", "/api/categories"),
            ("DELETE", "/api/bookmarks"),
            ("GET", "/api/bookmarks/reorder"),
            ("POST", "/api/auth/check"),
        ],
    )
    async def test_wrong_method_is_405_text(self, test_client, method, path):
        response = await test_client.request(method, path)

        assert response.status_code == 405
        assert response.text == "Method not allowed"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [
            ("GET", "/api/categories/"),
            ("PUT", "/api/categories/"),
            ("DELETE", "/api/bookmarks/"),
            ("GET", "/api/unknown"),
        ],
    )
    async def test_unmatched_path_is_404_text(self, test_client, method, path):
        response = await test_client.request(method, path)

        assert response.status_code == 404
        assert response.text == "404 page not found"

    @pytest.mark.asyncio
    async def test_trailing_slash_is_not_redirected(self, test_client, auth):
        response = await test_client.delete("/api/categories/", params=auth)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_request_id_is_echoed_or_generated(self, test_client):
        echoed = await test_client.get("/api/categories", headers={"X-Request-ID": "abc123"})
        generated = await test_client.get("/api/categories")

        assert echoed.headers["X-Request-ID"] == "abc123"
        assert len(generated.headers["X-Request-ID"]) == 8


class TestIndexPage:

    def test_render_index_escapes_title(self):
        template = "<title>{{ site_title }}</title><h1>{{ site_title }}</h1>"

        rendered = render_index(template, 'Tom & "Jerry" <Links>')

        assert rendered == (
            "<title>Tom &amp; &quot;Jerry&quot; &lt;Links&gt;</title>"
            "<h1>Tom &amp; &quot;Jerry&quot; &lt;Links&gt;</h1>"
        )

    @pytest.mark.asyncio
    async def test_index_carries_configured_title(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<title>Test Links</title>" in response.text
        assert "{{ site_title }}" not in response.text

    @pytest.mark.asyncio
    async def test_index_has_editing_widgets(self, test_client):
        """The script hangs its menu and icon picker off these containers."""
        response = await test_client.get("/")

        assert 'id="context-menu"' in response.text
        assert 'id="icon-picker"' in response.text
        assert 'id="cancel-edit"' in response.text


class TestStaticAssets:

    @pytest.mark.asyncio
    async def test_stylesheet_is_served(self, test_client):
        response = await test_client.get("/css/style.css")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")

    @pytest.mark.asyncio
    async def test_script_is_served(self, test_client):
        response = await test_client.get("/js/app.js")

        assert response.status_code == 200
        assert "makeSortable" in response.text
        assert "showToast" in response.text

    @pytest.mark.asyncio
    async def test_missing_asset_is_404_text(self, test_client):
        response = await test_client.get("/js/missing.js")

        assert response.status_code == 404
        assert response.text == "404 page not found"
