import logging

import discord

log = logging.getLogger(__name__)


def load_cogs(bot: discord.Bot, cogs: list[str]):
    for cog in cogs:
        try:
            bot.load_extension(f'cogs.{cog}')
            log.info("Extension %s successfully loaded!", cog)
        except discord.ExtensionNotFound:
            log.error("!!! Failed to load extension %s", cog)


async def send_error_response(ctx, error, custom_message: str = None, ephemeral: bool = True):
    content = f":x: Unexpected error: ```{error}```" if not custom_message else custom_message

    try:
        await ctx.respond(content=content, ephemeral=ephemeral)
    except discord.NotFound:
        await ctx.send(content=content)
    except discord.HTTPException:
        pass
