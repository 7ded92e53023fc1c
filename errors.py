from enum import Enum


class ErrorKind(Enum):
    INPUT = "input"
    FETCH = "fetch"
    PERSIST = "persist"


class RelayError(Exception):
    """Base for every failure the relay pipeline reports to its callers."""

    kind = None
    status_code = 500
    default_message = "Something went wrong!"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InputError(RelayError):
    kind = ErrorKind.INPUT
    status_code = 400
    default_message = "No file or URL provided"


class FetchError(RelayError):
    kind = ErrorKind.FETCH
    default_message = "Error downloading video. Please try again later."


class PersistError(RelayError):
    kind = ErrorKind.PERSIST
    default_message = "Error saving video locally."
