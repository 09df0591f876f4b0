"""Shared fixtures: a fake interaction context and emote factories."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from api import Emote, EmoteAuthor


def make_emote(animated: bool = True, host_url: str = "https://cdn/emote/{{size}}") -> Emote:
    return Emote(
        id="abc123",
        name="PogU",
        author=EmoteAuthor(name="x", avatar_url="https://cdn/avatar.png"),
        animated=animated,
        host_url=host_url,
    )


@pytest.fixture
def emote() -> Emote:
    return make_emote()


@pytest.fixture
def created_emoji():
    emoji = MagicMock()
    emoji.name = "pog"
    emoji.__str__.return_value = "<a:pog:42>"
    return emoji


@pytest.fixture
def ctx(created_emoji):
    """Interaction context invoked inside a guild by user `tester`."""
    context = MagicMock()
    context.defer = AsyncMock()
    context.edit = AsyncMock()
    context.create_guild_emoji = AsyncMock(return_value=created_emoji)

    context.author.name = "tester"
    context.author.id = 1234
    context.author.display_name = "Tester"
    context.author.display_avatar.url = "https://cdn.discordapp.com/avatars/1234/abc.png"
    context.guild.id = 99
    return context


@pytest.fixture
def resolvers(emote):
    from api import Platform

    return {
        Platform.SEVEN_TV: AsyncMock(return_value=emote),
        Platform.BETTERTTV: AsyncMock(return_value=emote),
    }
