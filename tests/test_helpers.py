import logging
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from helpers import load_cogs, send_error_response


@pytest.mark.asyncio
async def test_unexpected_error_is_reported():
    ctx = MagicMock()
    ctx.respond = AsyncMock()

    await send_error_response(ctx, RuntimeError("boom"))

    ctx.respond.assert_awaited_once_with(content=":x: Unexpected error: ```boom```", ephemeral=True)


@pytest.mark.asyncio
async def test_falls_back_to_send_when_interaction_is_gone():
    ctx = MagicMock()
    ctx.respond = AsyncMock(side_effect=discord.NotFound(MagicMock(status=404, reason="Not Found"), "Unknown"))
    ctx.send = AsyncMock()

    await send_error_response(ctx, RuntimeError("boom"), custom_message="custom")

    ctx.send.assert_awaited_once_with(content="custom")


def test_load_cogs_logs_each_extension(caplog):
    bot = MagicMock()
    bot.load_extension.side_effect = [None, discord.ExtensionNotFound("cogs.missing")]

    with caplog.at_level(logging.INFO, logger="helpers"):
        load_cogs(bot, ["emotes", "missing"])

    bot.load_extension.assert_any_call("cogs.emotes")
    bot.load_extension.assert_any_call("cogs.missing")

    loaded, failed = [record for record in caplog.records if record.name == "helpers"]
    assert (loaded.msg, loaded.args) == ("Extension %s successfully loaded!", ("emotes",))
    assert (failed.levelno, failed.args) == (logging.ERROR, ("missing",))
