"""Unit tests for NodeService."""
import pytest

from updown import APIError


class TestNodes:
    """Tests for the node endpoints."""

    @pytest.mark.asyncio
    async def test_list(self, client, server) -> None:
        """Test nodes are keyed by location code."""
        server.reply("nodes", 200, {
            "lan": {"ip": "1.2.3.4", "ip6": "::1", "city": "Los Angeles", "country": "United States",
                    "country_code": "US", "lat": 34.05, "lng": -118.24},
            "fra": {"ip": "5.6.7.8", "ip6": "::2", "city": "Frankfurt", "country": "Germany",
                    "country_code": "DE"},
        })

        nodes, response = await client.node.list()

        assert response.status_code == 200
        assert len(nodes) == 2
        assert nodes["lan"].ip == "1.2.3.4"
        assert nodes["lan"].lat == 34.05
        assert nodes["fra"].city == "Frankfurt"
        assert nodes["fra"].country_code == "DE"

    @pytest.mark.asyncio
    async def test_list_error(self, client, server) -> None:
        """Test API errors propagate."""
        server.reply("nodes", 500, {"message": "server error"})

        with pytest.raises(APIError) as exc_info:
            await client.node.list()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_list_ipv4(self, client, server) -> None:
        """Test the IPv4 address list."""
        server.reply("nodes/ipv4", 200, ["1.2.3.4", "5.6.7.8"])

        ips, response = await client.node.list_ipv4()

        assert response.status_code == 200
        assert ips == ["1.2.3.4", "5.6.7.8"]
        assert server.requests[0].method == "GET"

    @pytest.mark.asyncio
    async def test_list_ipv6(self, client, server) -> None:
        """Test the IPv6 address list."""
        server.reply("nodes/ipv6", 200, ["2001:db8::1", "2001:db8::2"])

        ips, _ = await client.node.list_ipv6()

        assert ips == ["2001:db8::1", "2001:db8::2"]
