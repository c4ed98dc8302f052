import time

from aiohttp import web
from loguru import logger

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


class HealthServer:
    """Tiny HTTP endpoint the hosting platform (and the keep-alive pinger) can hit."""

    def __init__(self, bot=None, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT):
        self.bot = bot
        self.host = host
        self.port = port
        self.app: web.Application | None = None
        self.runner: web.AppRunner | None = None
        self.site: web.TCPSite | None = None
        self._started_at = time.monotonic()
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/", self.health_handler)
        app.router.add_get("/health", self.health_handler)
        return app

    async def start(self):
        if self._running:
            logger.debug("Health server already running, skipping")
            return

        self.app = self.make_app()
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()

        self.site = web.TCPSite(self.runner, self.host, self.port)
        await self.site.start()

        self._running = True
        logger.info("Health check server listening on {}:{}", self.host, self.port)

    async def stop(self):
        if not self._running:
            return

        if self.site:
            await self.site.stop()
        if self.runner:
            await self.runner.cleanup()

        self.site = None
        self.runner = None
        self._running = False
        logger.info("Health check server stopped")

    def status(self) -> dict:
        user = getattr(self.bot, "user", None)
        guilds = getattr(self.bot, "guilds", None) or []
        return {
            "status": "healthy",
            "uptime": round(time.monotonic() - self._started_at, 3),
            "bot": str(user) if user else "connecting...",
            "servers": len(guilds),
        }

    async def health_handler(self, request: web.Request) -> web.Response:
        return web.json_response(self.status())
