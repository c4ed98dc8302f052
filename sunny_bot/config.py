import aiofiles
import json
import os
from collections import defaultdict

CONFIG_FILE = "config.json"

# Default keep-alive settings
DEFAULT_KEEP_ALIVE = {
    "enabled": True,  # Ping the public health endpoint to stop the host idling out
    "interval_minutes": 14,  # Just under the 15 minute spin-down window
    "timeout_seconds": 30,  # Per-request timeout
    "url": None,  # Falls back to KEEP_ALIVE_URL / RENDER_EXTERNAL_URL
}

class Config:
    def __init__(self, global_config: dict, path: str = CONFIG_FILE):
        self.global_config = global_config
        self.path = path

    @staticmethod
    def try_init_from_file(path: str = CONFIG_FILE) -> "Config":
        global_config = defaultdict(dict)

        try:
            with open(path, "r") as f:
                global_config.update(json.loads(f.read()))
        except FileNotFoundError:
            pass

        return Config(global_config, path)

    async def _save(self):
        async with aiofiles.open(self.path, mode="w") as f:
            await f.write(json.dumps(self.global_config, indent=2))

    def get_keep_alive_config(self) -> dict:
        """Get keep-alive settings, with defaults."""
        keep_alive = self.global_config.get("keep_alive", {})

        # Merge with defaults
        return {**DEFAULT_KEEP_ALIVE, **keep_alive}

    async def set_keep_alive_config(self, configuration: dict):
        self.global_config["keep_alive"] = {**self.global_config.get("keep_alive", {}), **configuration}
        await self._save()

    def resolve_keep_alive_url(self, env: dict | None = None) -> str | None:
        """Pick the URL to keep warm: explicit env var, then the hosting provider's, then config."""
        env = os.environ if env is None else env

        if env.get("KEEP_ALIVE_URL"):
            return env["KEEP_ALIVE_URL"]

        # Render exposes the service's public address; its health route is /health
        render_url = env.get("RENDER_EXTERNAL_URL")
        if render_url:
            return render_url.rstrip("/") + "/health"

        return self.get_keep_alive_config()["url"]
