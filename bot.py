import discord

from ctx import SubApplicationContext


class EmoteBot(discord.Bot):
    async def get_application_context(self, interaction: discord.Interaction, cls=SubApplicationContext):
        return await super().get_application_context(interaction, cls=cls)


bot = EmoteBot(intents=discord.Intents.default())
