"""
Unit tests for the health endpoint (health.py).

Tests cover:
- status(): payload before and after the bot connects
- GET / and /health via aiohttp's test client, 404 elsewhere
- start()/stop() idempotence
"""

import pytest
from unittest.mock import Mock

from aiohttp.test_utils import TestClient, TestServer

from sunny_bot.health import HealthServer


def make_bot(user="Sunny#0001", guild_count=3):
    bot = Mock()
    bot.user = user
    bot.guilds = [Mock() for _ in range(guild_count)]
    return bot


class TestStatus:
    def test_connected_bot(self):
        server = HealthServer(make_bot())
        status = server.status()

        assert status["status"] == "healthy"
        assert status["bot"] == "Sunny#0001"
        assert status["servers"] == 3
        assert status["uptime"] >= 0

    def test_not_yet_connected(self):
        server = HealthServer(make_bot(user=None, guild_count=0))
        status = server.status()

        assert status["bot"] == "connecting..."
        assert status["servers"] == 0

    def test_without_bot(self):
        assert HealthServer().status()["servers"] == 0


class TestRoutes:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/health"])
    async def test_health_routes(self, path):
        server = HealthServer(make_bot())
        async with TestClient(TestServer(server.make_app())) as client:
            resp = await client.get(path)
            assert resp.status == 200
            body = await resp.json()
            assert body["status"] == "healthy"
            assert body["servers"] == 3

    @pytest.mark.asyncio
    async def test_unknown_route_404(self):
        server = HealthServer(make_bot())
        async with TestClient(TestServer(server.make_app())) as client:
            resp = await client.get("/nope")
            assert resp.status == 404


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_start_stop(self):
        server = HealthServer(make_bot(), host="127.0.0.1", port=0)

        await server.start()
        assert server.running is True
        await server.start()  # second start is a no-op
        assert server.running is True

        await server.stop()
        assert server.running is False
        assert server.runner is None

    @pytest.mark.asyncio
    async def test_stop_when_not_running(self):
        server = HealthServer()
        await server.stop()
        assert server.running is False
