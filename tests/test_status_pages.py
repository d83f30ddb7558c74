"""Unit tests for StatusPageService."""
import json

import pytest

from updown import APIError, NotDeletedError, StatusPageItem

from .conftest import json_response


class TestStatusPages:
    """Tests for the status page endpoints."""

    @pytest.mark.asyncio
    async def test_list(self, client, server) -> None:
        """Test listing status pages."""
        server.reply("status_pages", 200, [
            {"token": "sp1", "url": "https://status.example.com", "name": "My Status",
             "description": "Desc", "visibility": "public", "checks": ["aaaa", "bbbb"]},
            {"token": "sp2", "url": "https://status2.example.com", "name": "Other",
             "visibility": "private", "checks": ["cccc"]},
        ])

        pages, response = await client.status_page.list()

        assert response.status_code == 200
        assert len(pages) == 2
        assert pages[0].token == "sp1"
        assert pages[0].visibility == "public"
        assert pages[0].checks == ["aaaa", "bbbb"]

    @pytest.mark.asyncio
    async def test_list_null_checks(self, client, server) -> None:
        """Test a null check list decodes to an empty list."""
        server.reply("status_pages", 200, [{"token": "sp", "checks": None, "name": None}])

        pages, _ = await client.status_page.list()

        assert pages[0].token == "sp"
        assert pages[0].checks == []
        assert pages[0].name is None

    @pytest.mark.asyncio
    async def test_list_error(self, client, server) -> None:
        """Test API errors propagate."""
        server.reply("status_pages", 500, {"message": "server error"})

        with pytest.raises(APIError):
            await client.status_page.list()

    @pytest.mark.asyncio
    async def test_add(self, client, server) -> None:
        """Test creating a status page."""
        received = {}

        def handler(request):
            received["method"] = request.method
            received["body"] = json.loads(request.content)
            return json_response(201, {"token": "sp3", "name": "My Page", "visibility": "public",
                                       "checks": ["aaaa", "bbbb"]})

        server.route("status_pages", handler)

        page, response = await client.status_page.add(
            StatusPageItem(name="My Page", visibility="public", checks=["aaaa", "bbbb"])
        )

        assert received["method"] == "POST"
        assert received["body"] == {"name": "My Page", "visibility": "public", "checks": ["aaaa", "bbbb"]}
        assert response.status_code == 201
        assert page.token == "sp3"

    @pytest.mark.asyncio
    async def test_update_sends_empty_checks(self, client, server) -> None:
        """Test checks is sent even when empty, so an update can clear it."""
        received = {}

        def handler(request):
            received["method"] = request.method
            received["body"] = json.loads(request.content)
            return json_response(200, {"token": "sp1", "name": "Renamed", "checks": []})

        server.route("status_pages/sp1", handler)

        page, _ = await client.status_page.update("sp1", StatusPageItem(name="Renamed"))

        assert received == {"method": "PUT", "body": {"name": "Renamed", "checks": []}}
        assert page.name == "Renamed"
        assert page.checks == []

    @pytest.mark.asyncio
    async def test_remove(self, client, server) -> None:
        """Test deleting a status page."""
        server.reply("status_pages/sp1", 200, {"deleted": True})

        deleted, response = await client.status_page.remove("sp1")

        assert deleted is True
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_remove_not_deleted(self, client, server) -> None:
        """Test deleted:false is reported as an error."""
        server.reply("status_pages/sp1", 200, {"deleted": False})

        with pytest.raises(NotDeletedError):
            await client.status_page.remove("sp1")

    @pytest.mark.asyncio
    async def test_remove_empty_body(self, client, server) -> None:
        """Test a delete without a body is not treated as success."""
        server.route("status_pages/sp1", lambda request: json_response(204, ""))

        with pytest.raises(NotDeletedError):
            await client.status_page.remove("sp1")

    @pytest.mark.asyncio
    async def test_remove_deleted_null(self, client, server) -> None:
        """Test deleted:null is reported as not deleted."""
        server.reply("status_pages/sp1", 200, {"deleted": None})

        with pytest.raises(NotDeletedError) as exc_info:
            await client.status_page.remove("sp1")

        assert exc_info.value.response.status_code == 200
