import discord
from loguru import logger

try:
    from config import Config
    from health import HealthServer, DEFAULT_PORT
    from keep_alive import KeepAlivePinger
    from role_tools import get_available_tools
except ImportError:
    from .config import Config
    from .health import HealthServer, DEFAULT_PORT
    from .keep_alive import KeepAlivePinger
    from .role_tools import get_available_tools


class SunnyBot(discord.bot.Bot):
    def __init__(self, root_user, config: Config = None, pinger: KeepAlivePinger = None,
                 health_server: HealthServer = None, port: int = DEFAULT_PORT):
        super().__init__(intents=self._setup_intents())
        self.root_user = root_user
        self.config = config or Config.try_init_from_file()

        keep_alive_config = self.config.get_keep_alive_config()
        self.pinger = pinger or KeepAlivePinger(
            interval_minutes=keep_alive_config["interval_minutes"],
            timeout_seconds=keep_alive_config["timeout_seconds"],
        )
        self.health_server = health_server or HealthServer(self, port=port)

    def _setup_intents(self):
        intents = discord.Intents().default()
        intents.members = True
        return intents

    # overload
    async def on_ready(self):
        logger.info("We have logged in as {}", self.user)
        for guild in self.guilds:
            logger.info("guild.id={} guild.name={}", guild.id, guild.name)

        await self.start_background_services()

    async def start_background_services(self):
        """Bring up the health endpoint, then keep it warm. Safe to call on every reconnect."""
        await self.health_server.start()

        keep_alive_config = self.config.get_keep_alive_config()
        if not keep_alive_config["enabled"]:
            logger.info("Keep-alive disabled in config")
            return

        self.pinger.start(self.config.resolve_keep_alive_url())

    async def stop_background_services(self):
        await self.pinger.close()
        await self.health_server.stop()

    def role_tools_for(self, guild: discord.Guild) -> list[dict]:
        """Role tool definitions the agent may use in this guild, given the bot's permissions."""
        return get_available_tools(guild.me.guild_permissions)

    # overload
    async def close(self):
        await self.stop_background_services()
        await super().close()
