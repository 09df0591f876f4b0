class InvalidEmoteURL(Exception):
    def __init__(self, url: str):
        super().__init__(f"`{url}` is not a valid emote URL.")


class EmoteJSONReadFail(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class EmoteBytesReadFail(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class EmoteImportError(Exception):
    """
    Terminal failure of an /emote invocation.
    `as_embed` decides if the message is shown in an error embed or as plain text.
    """
    message: str = "`❌` Something went wrong."
    as_embed: bool = False

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class MissingInput(EmoteImportError):
    message = "`❌` URL is required."


class UnsupportedPlatform(EmoteImportError):
    message = "`❌` Invalid emote URL.\nCurrently supported platforms: `BetterTTV, 7TV`"
    as_embed = True


class AdapterFetchFailure(EmoteImportError):
    message = "`❌` Failed to fetch emote data."


class EmoteNotFound(EmoteImportError):
    message = "`❌` Emote not found."
    as_embed = True


class NotInServerContext(EmoteImportError):
    message = "`❌` This command must be used in a server."


class UploadFailure(EmoteImportError):
    message = "`❌` An error occurred while uploading the emote."
    as_embed = True


# (substrings of Discord's rejection message, hint shown to the user)
# py-cord flattens form errors into "In <field>: <message>" lines
UPLOAD_ERROR_HINTS: list[tuple[tuple[str, ...], str]] = [
    (
        ("Asset exceeds maximum size:", "Failed to resize asset below the maximum size:"),
        "Emote is too big. You can try to change it's size by using the \"size\" parameter."
    ),
    (
        ("In name:",),
        "Emote name is invalid. You can change the name with the \"name\" parameter."
    ),
]


def upload_error_hint(error: Exception) -> str:
    message = str(error)

    for patterns, hint in UPLOAD_ERROR_HINTS:
        if any(pattern in message for pattern in patterns):
            return hint

    return message
