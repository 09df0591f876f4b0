import os
import logging

SEVEN_TV_API_URL: str = "https://7tv.io"
SEVEN_TV_API_VERSION: str = "v3"

BETTERTTV_API_URL: str = "https://api.betterttv.net/3"
BETTERTTV_CDN_URL: str = "https://cdn.betterttv.net"

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", logging.getLevelName(logging.INFO))

# Discord emoji size limit, it *should* be 256kb
EMOJI_SIZE_LIMIT: int = 262144  # in bytes

EMOTE_SIZES: list[str] = ["1x", "2x", "3x", "4x"]

DEFAULT_ANIMATED_SIZE: str = "2x"
DEFAULT_STATIC_SIZE: str = "4x"

# BetterTTV CDN only goes up to 3x
BETTERTTV_MAX_SIZE: str = "3x"

COLOR_PROGRESS: int = 0x262626
COLOR_SUCCESS: int = 0x00ff59
COLOR_ERROR: int = 0xff2020
COLOR_UPLOAD_FAILED: int = 0xff2323

COGS: list[str] = ["emotes"]
