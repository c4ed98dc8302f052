import os
import sys

from loguru import logger

from bot import SunnyBot
from commands import KeepAliveMixin

# Nobody gets the admin commands unless ROOT_USER names them
root_user = os.environ.get("ROOT_USER")

discord_api_key = os.environ.get("DISCORD_API_KEY")
port = int(os.environ.get("PORT", "3000"))
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

logger.remove()
logger.add(sys.stderr, level=log_level)

bot = SunnyBot(root_user=root_user, port=port)
bot.add_cog(KeepAliveMixin(bot))

def run():
    if not discord_api_key:
        logger.error("DISCORD_API_KEY is not set")
        raise SystemExit(2)
    if not root_user:
        logger.error("ROOT_USER is not set")
        raise SystemExit(2)
    bot.run(discord_api_key)

if __name__ == "__main__":
    run()
