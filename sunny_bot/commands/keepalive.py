import discord
from discord.ext import commands
from loguru import logger

try:
    from bot import SunnyBot
except ImportError:
    from ..bot import SunnyBot


def format_stats(stats: dict) -> str:
    last_ping = stats["last_ping_timestamp"] or "never"
    last_outcome = stats["last_outcome"] if stats["last_outcome"] is not None else "n/a"
    return f"""**Keep-Alive Status:**
Running: **{stats['running']}**
URL: **{stats['url'] or 'not set'}**
Interval: **{stats['interval_minutes']:g} minutes**
Pings: **{stats['total_pings']}** ({stats['success_count']} ok, {stats['failure_count']} failed)
Success rate: **{stats['success_rate']}**
Last ping: **{last_ping}** ({last_outcome})"""


class KeepAliveMixin(commands.Cog):
    def __init__(self, bot: SunnyBot):
        self.bot = bot

    async def _reject_non_root(self, ctx: discord.ApplicationContext) -> bool:
        if ctx.author.name != self.bot.root_user:
            await ctx.send_response(
                content="Sorry, you don't have permission to use this command!",
                ephemeral=True)
            return True
        return False

    @commands.slash_command(description="Show keep-alive ping statistics")
    async def keepalive_status(self, ctx: discord.ApplicationContext):
        if await self._reject_non_root(ctx):
            return

        await ctx.defer(ephemeral=True)
        await ctx.followup.send(format_stats(self.bot.pinger.get_stats()))

    @commands.slash_command(description="Change how often the keep-alive ping fires")
    async def keepalive_interval(self, ctx: discord.ApplicationContext, minutes: int):
        if await self._reject_non_root(ctx):
            return

        logger.info("/keepalive_interval {} by {}", minutes, ctx.author.display_name)
        await ctx.defer(ephemeral=True)

        if minutes < 1:
            await ctx.followup.send("Interval must be at least 1 minute!")
            return

        self.bot.pinger.set_interval_minutes(minutes)
        await self.bot.config.set_keep_alive_config({"interval_minutes": minutes})

        await ctx.followup.send(f"Keep-alive interval set to **{minutes} minutes**")

    @commands.slash_command(description="Reset keep-alive ping statistics")
    async def keepalive_reset(self, ctx: discord.ApplicationContext):
        if await self._reject_non_root(ctx):
            return

        logger.info("/keepalive_reset by {}", ctx.author.display_name)
        await ctx.defer(ephemeral=True)

        self.bot.pinger.reset_stats()
        await ctx.followup.send("Keep-alive statistics reset.")
