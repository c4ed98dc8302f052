"""
Unit tests for keep-alive configuration (config.py).

Tests cover:
- try_init_from_file(): missing and present files
- get_keep_alive_config(): defaults merged with file values
- set_keep_alive_config(): persistence
- resolve_keep_alive_url(): env precedence
"""

import json
import pytest
from collections import defaultdict

from sunny_bot.config import Config, DEFAULT_KEEP_ALIVE


@pytest.fixture
def empty_config(tmp_path):
    return Config(defaultdict(dict), str(tmp_path / "config.json"))


class TestLoad:
    def test_missing_file_gives_defaults(self, tmp_path):
        cfg = Config.try_init_from_file(str(tmp_path / "nope.json"))
        assert cfg.get_keep_alive_config() == DEFAULT_KEEP_ALIVE

    def test_reads_keep_alive_section(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"keep_alive": {"interval_minutes": 5}}))

        cfg = Config.try_init_from_file(str(path))
        ka = cfg.get_keep_alive_config()

        assert ka["interval_minutes"] == 5
        assert ka["timeout_seconds"] == 30
        assert ka["enabled"] is True


class TestPersist:
    @pytest.mark.asyncio
    async def test_set_keep_alive_config_writes_file(self, empty_config):
        await empty_config.set_keep_alive_config({"interval_minutes": 10})

        with open(empty_config.path) as f:
            saved = json.load(f)
        assert saved["keep_alive"]["interval_minutes"] == 10
        assert empty_config.get_keep_alive_config()["interval_minutes"] == 10

    @pytest.mark.asyncio
    async def test_set_keep_alive_config_merges(self, empty_config):
        await empty_config.set_keep_alive_config({"interval_minutes": 10})
        await empty_config.set_keep_alive_config({"enabled": False})

        ka = empty_config.get_keep_alive_config()
        assert ka["interval_minutes"] == 10
        assert ka["enabled"] is False


class TestResolveUrl:
    def test_explicit_env_wins(self, empty_config):
        env = {"KEEP_ALIVE_URL": "https://a.example.com/ping", "RENDER_EXTERNAL_URL": "https://b.example.com"}
        assert empty_config.resolve_keep_alive_url(env) == "https://a.example.com/ping"

    def test_render_url_gets_health_path(self, empty_config):
        env = {"RENDER_EXTERNAL_URL": "https://b.example.com/"}
        assert empty_config.resolve_keep_alive_url(env) == "https://b.example.com/health"

    def test_falls_back_to_config(self):
        cfg = Config(defaultdict(dict, {"keep_alive": {"url": "https://c.example.com/health"}}))
        assert cfg.resolve_keep_alive_url({}) == "https://c.example.com/health"

    def test_none_when_unset(self, empty_config):
        assert empty_config.resolve_keep_alive_url({}) is None
