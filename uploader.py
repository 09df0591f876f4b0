import logging
from enum import Enum
from dataclasses import dataclass
from typing import Awaitable, Callable

import discord

import config
from api import Emote, Platform, DisplayURLs, classify, build_display_urls, api_instance
from api.errors import *

EmoteResolver = Callable[[str], Awaitable[Emote | None]]


class UploadState(str, Enum):
    VALIDATING = "validating"
    RESOLVING = "resolving"
    UPLOADING = "uploading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class CommandInput:
    url: str | None
    size: str | None = None
    name: str | None = None
    disable_animations: bool | None = None


@dataclass
class UploadOutcome:
    state: UploadState
    error: EmoteImportError | None = None
    emoji: discord.Emoji | None = None
    urls: DisplayURLs | None = None


class EmoteUploadHandler:
    """
    Drives a single /emote invocation:
    defer -> resolve emote -> progress embed -> create guild emoji -> final embed.

    Every invocation ends with exactly one final message, failures are reported
    to the user and returned in the outcome instead of being raised.
    """

    def __init__(self, resolvers: dict[Platform, EmoteResolver] = None, logger: logging.Logger = None):
        self._resolvers = resolvers
        self.log = logger or logging.getLogger(__name__)

    @property
    def resolvers(self) -> dict[Platform, EmoteResolver]:
        return self._resolvers if self._resolvers is not None else api_instance.resolvers()

    async def handle(self, ctx, command_input: CommandInput) -> UploadOutcome:
        state = UploadState.VALIDATING
        self.log.info("/emote received from %s: %s", ctx.author, command_input)

        # Discord only gives us 3 seconds for the initial response
        await ctx.defer()

        try:
            platform = self._validate(command_input)

            state = UploadState.RESOLVING
            emote = await self._resolve(platform, command_input.url)
        except EmoteImportError as error:
            return await self._fail(ctx, state, error)

        name = command_input.name or emote.name
        disable_animations = bool(command_input.disable_animations)

        urls = build_display_urls(emote.host_url, platform, command_input.size)
        image_url = urls.pick(emote.animated and not disable_animations)
        self.log.debug("Constructed emote URLs: %s", urls)

        state = UploadState.UPLOADING
        embed = discord.Embed(
            title=f"{emote.name} by {emote.author.name} ({platform.value})",
            url=command_input.url,
            description="Uploading emote to Discord...",
            timestamp=discord.utils.utcnow(),
            color=discord.Color(config.COLOR_PROGRESS)
        )
        embed.set_author(name=emote.author.name, icon_url=emote.author.avatar_url)
        embed.set_thumbnail(url=image_url)
        embed.set_footer(text=f"Executed by @{ctx.author.name}")

        try:
            await ctx.edit(embed=embed)

            if ctx.guild is None:
                raise NotInServerContext()

            self.log.info("Uploading %r as `%s` to guild %s", emote, name, ctx.guild.id)
            emoji = await ctx.create_guild_emoji(
                image_url=image_url, name=name, reason=f"@{ctx.author.name} ({ctx.author.id}) used /emote"
            )
            self.log.info("Emote uploaded: %s", emoji)

            embed.description = f"Emote {emoji} **{emoji.name}** uploaded to Discord!"
            embed.set_thumbnail(url=image_url)
            embed.colour = discord.Color(config.COLOR_SUCCESS)
            await ctx.edit(embed=embed)

        except NotInServerContext as error:
            return await self._fail(ctx, state, error, urls=urls)

        except Exception as e:
            self.log.error("Error uploading emote or editing reply", exc_info=e)
            error = UploadFailure(f"{UploadFailure.message}\n{upload_error_hint(e)}")

            embed.description = error.message
            embed.colour = discord.Color(config.COLOR_UPLOAD_FAILED)
            await ctx.edit(embed=embed)

            return UploadOutcome(state=UploadState.FAILED, error=error, urls=urls)

        return UploadOutcome(state=UploadState.SUCCEEDED, emoji=emoji, urls=urls)

    def _validate(self, command_input: CommandInput) -> Platform:
        if not command_input.url:
            raise MissingInput()

        platform = classify(command_input.url)
        self.log.debug("Platform detected: %s", platform)

        if platform is None:
            raise UnsupportedPlatform()

        return platform

    async def _resolve(self, platform: Platform, url: str) -> Emote:
        try:
            emote = await self.resolvers[platform](url)
        except Exception as e:
            self.log.error("Error fetching emote data for %s", url, exc_info=e)
            raise AdapterFetchFailure() from e

        if not emote:
            raise EmoteNotFound()

        self.log.debug("Fetched emote data: %r", emote)
        return emote

    async def _fail(self, ctx, state: UploadState, error: EmoteImportError, urls: DisplayURLs = None) -> UploadOutcome:
        self.log.warning("/emote failed while %s: %s", state.value, type(error).__name__)

        if error.as_embed:
            await ctx.edit(embed=error_embed(ctx.author, error.message))
        else:
            await ctx.edit(content=error.message, embed=None)

        return UploadOutcome(state=UploadState.FAILED, error=error, urls=urls)


def error_embed(user: discord.abc.User, description: str) -> discord.Embed:
    embed = discord.Embed(
        title="Error",
        description=description,
        timestamp=discord.utils.utcnow(),
        color=discord.Color(config.COLOR_ERROR)
    )
    embed.set_author(name=user.display_name, icon_url=user.display_avatar.url)

    return embed
