import os
import discord
import logging
from dotenv import load_dotenv
load_dotenv()

import config
from ctx import SubApplicationContext
from helpers import load_cogs, send_error_response
from bot import bot
from api import api_instance


logging.basicConfig(level=config.LOGGING_LEVEL)
log = logging.getLogger(__name__)


@bot.event
async def on_application_command_error(ctx: SubApplicationContext, error):
    if isinstance(error, discord.ApplicationCommandInvokeError):
        error = error.original

    if isinstance(error, discord.Forbidden):
        return await send_error_response(
            ctx, error, ":x: Bot lacks permissions to do that. *(Manage Expressions is required to upload emotes)*"
        )

    else:
        await send_error_response(ctx, error)
        raise error


async def main():
    await api_instance.create_session()
    await bot.start(os.getenv("TOKEN"))


if __name__ == "__main__":
    load_cogs(bot, config.COGS)

    # py-cord binds the bot to its own loop on creation
    event_loop = bot.loop

    try:
        event_loop.run_until_complete(main())
    except KeyboardInterrupt:
        pass
    finally:
        log.info("🛑 Shutting Down")
        event_loop.run_until_complete(bot.close())
        event_loop.run_until_complete(api_instance.close_session())
        event_loop.stop()
