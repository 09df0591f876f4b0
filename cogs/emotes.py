import discord

import config
from ctx import SubApplicationContext
from uploader import CommandInput, EmoteUploadHandler


class EmotesCog(discord.Cog):
    def __init__(self, bot: discord.Bot, handler: EmoteUploadHandler = None):
        self.bot = bot
        self.handler = handler or EmoteUploadHandler()

    @discord.slash_command(
        name="emote", description="Upload a BetterTTV or 7TV emote to this server."
    )
    async def emote(
            self, ctx: SubApplicationContext,
            url: discord.Option(str, description='BetterTTV or 7TV emote URL'),
            size: discord.Option(
                str, description='Emote size (BetterTTV stops at 3x)', choices=config.EMOTE_SIZES, required=False
            ) = None,
            name: discord.Option(
                str, description='Custom name for the emote', required=False, max_length=32, min_length=2
            ) = None,
            disable_animations: discord.Option(
                bool, description='Upload the static version of an animated emote', required=False
            ) = False
    ):
        await self.handler.handle(
            ctx, CommandInput(url=url, size=size, name=name, disable_animations=disable_animations)
        )


def setup(bot: discord.Bot):
    bot.add_cog(EmotesCog(bot))
