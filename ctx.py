import logging

import discord

import config
from api import api_instance

log = logging.getLogger(__name__)


class SubApplicationContext(discord.ApplicationContext):
    async def create_guild_emoji(self, image_url: str, name: str, reason: str) -> discord.Emoji:
        """
        Downloads the image and registers it as a custom emoji of the current guild.
        Size/name validation is left to Discord, rejections surface as `discord.HTTPException`.
        """
        image_bytes = await api_instance.read_bytes(image_url)

        if len(image_bytes) > config.EMOJI_SIZE_LIMIT:
            log.warning(
                "%s weighs %d bytes, over the %d bytes emoji limit", image_url, len(image_bytes),
                config.EMOJI_SIZE_LIMIT
            )

        return await self.guild.create_custom_emoji(name=name, image=image_bytes, reason=reason)
