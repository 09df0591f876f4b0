import logging

import aiohttp

import config
from api.emote import Emote, EmoteAuthor
from api.errors import *
from api.urls import Platform, SIZE_PLACEHOLDER, emote_id_from_url

_seven_tv_endpoint = f"{config.SEVEN_TV_API_URL}/{config.SEVEN_TV_API_VERSION}"

log = logging.getLogger(__name__)


def _absolute_url(url: str | None) -> str | None:
    # 7TV hands out protocol-relative URLs (//cdn.7tv.app/...)
    if url and url.startswith("//"):
        return f"https:{url}"

    return url


class EmotesAPI:
    def __init__(self):
        self._session: aiohttp.ClientSession = None  # type: ignore

    async def create_session(self):
        self._session = aiohttp.ClientSession()

    async def close_session(self):
        if self._session and not self._session.closed:
            await self._session.close()

    async def _get_json(self, url: str) -> dict | None:
        try:
            async with self._session.get(url) as response:
                log.debug("GET %s -> %s", url, response.status)

                match response.status:
                    case 404:
                        return None

                    case 200:
                        response_json = await response.json()
                        if isinstance(response_json, dict) and response_json.get('status') == "Not Found":
                            return None

                        return response_json

                    case _:
                        raise EmoteJSONReadFail(f"Failed to read JSON from {url} (HTTP {response.status})")

        except aiohttp.InvalidURL:
            raise aiohttp.InvalidURL(url=url, description="No Such URL")

    async def seventv_emote_get(self, url: str) -> Emote | None:
        emote_id = emote_id_from_url(url, Platform.SEVEN_TV)
        if not emote_id:
            raise InvalidEmoteURL(url)

        emote_json = await self._get_json(f"{_seven_tv_endpoint}/emotes/{emote_id}")

        if not emote_json:
            return None

        owner = emote_json.get("owner") or {}

        return Emote(
            id=emote_json.get("id", emote_id),
            name=emote_json.get("name", "")[:32],
            author=EmoteAuthor(
                name=owner.get("display_name") or owner.get("username") or "Unknown",
                avatar_url=_absolute_url(owner.get("avatar_url"))
            ),
            animated=emote_json.get("animated", False),
            host_url=f"{_absolute_url(emote_json['host']['url'])}/{SIZE_PLACEHOLDER}"
        )

    async def bttv_emote_get(self, url: str) -> Emote | None:
        emote_id = emote_id_from_url(url, Platform.BETTERTTV)
        if not emote_id:
            raise InvalidEmoteURL(url)

        emote_json = await self._get_json(f"{config.BETTERTTV_API_URL}/emotes/{emote_id}")

        if not emote_json:
            return None

        user = emote_json.get("user") or {}

        return Emote(
            id=emote_json.get("id", emote_id),
            name=emote_json.get("code", "")[:32],
            author=EmoteAuthor(
                name=user.get("displayName") or user.get("name") or "Unknown",
                avatar_url=user.get("avatar")
            ),
            animated=emote_json.get("animated", False),
            host_url=f"{config.BETTERTTV_CDN_URL}/emote/{emote_id}/{SIZE_PLACEHOLDER}"
        )

    def resolvers(self) -> dict:
        return {
            Platform.SEVEN_TV: self.seventv_emote_get,
            Platform.BETTERTTV: self.bttv_emote_get,
        }

    async def read_bytes(self, url: str) -> bytes:
        async with self._session.get(url) as r:
            if r.status == 200:
                return await r.read()

            raise EmoteBytesReadFail(f"Failed reading bytes from {url}")
