from dataclasses import dataclass


@dataclass
class EmoteAuthor:
    name: str
    avatar_url: str | None = None


@dataclass
class Emote:
    id: str
    name: str
    author: EmoteAuthor
    animated: bool

    # contains a `{{size}}` placeholder, f.e https://cdn.7tv.app/emote/<id>/{{size}}
    host_url: str

    def __repr__(self):
        return f"Emote({self.id=}, {self.name=}, {self.animated=}, {self.host_url})"
