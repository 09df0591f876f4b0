import re
from enum import Enum
from dataclasses import dataclass

import config

SIZE_PLACEHOLDER = "{{size}}"


class Platform(str, Enum):
    BETTERTTV = "bttv"
    SEVEN_TV = "7tv"


_url_patterns: dict[Platform, re.Pattern] = {
    Platform.SEVEN_TV: re.compile(r"^https?://(?:www\.|old\.)?7tv\.app/emotes/(?P<id>[0-9A-Za-z]+)/?(?:[?#].*)?$"),
    Platform.BETTERTTV: re.compile(r"^https?://(?:www\.)?betterttv\.com/emotes/(?P<id>[0-9a-f]{24})/?(?:[?#].*)?$"),
}


@dataclass
class DisplayURLs:
    animated_url: str
    static_url: str

    def pick(self, animated: bool) -> str:
        return self.animated_url if animated else self.static_url


def classify(url: str) -> Platform | None:
    """Detects which emote platform the URL belongs to, `None` if neither."""
    url = url.strip()

    for platform, pattern in _url_patterns.items():
        if pattern.match(url):
            return platform

    return None


def emote_id_from_url(url: str, platform: Platform) -> str | None:
    match = _url_patterns[platform].match(url.strip())

    return match.group("id") if match else None


def effective_size(platform: Platform, size: str | None, default: str) -> str:
    if not size:
        return default

    if platform is Platform.BETTERTTV and size == "4x":
        return config.BETTERTTV_MAX_SIZE

    return size


def build_display_urls(host_url: str, platform: Platform, size: str | None = None) -> DisplayURLs:
    animated_size = effective_size(platform, size, config.DEFAULT_ANIMATED_SIZE)
    static_size = effective_size(platform, size, config.DEFAULT_STATIC_SIZE)

    return DisplayURLs(
        animated_url=host_url.replace(SIZE_PLACEHOLDER, animated_size) + ".gif",
        static_url=host_url.replace(SIZE_PLACEHOLDER, static_size) + ".webp",
    )
