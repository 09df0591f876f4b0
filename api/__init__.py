from api.emote import Emote, EmoteAuthor
from api.urls import Platform, DisplayURLs, classify, build_display_urls
from api.api import EmotesAPI

api_instance = EmotesAPI()
