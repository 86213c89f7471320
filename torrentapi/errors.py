"""Exceptions raised by the torrentapi client."""


class TorrentAPIError(Exception):
    """Base class for every client error."""


class TransportError(TorrentAPIError):
    """Network or HTTP failure while talking to the API."""


class DecodeError(TorrentAPIError):
    """Response body could not be decoded."""

    def __init__(self, message: str, query: str = ""):
        self.query = query
        if query:
            message = f"query: {query}, Error: {message}"
        super().__init__(message)


class ExpiredTokenError(TorrentAPIError):
    """Token was still reported as expired after renewing it."""

    def __init__(self, message: str = "expired token"):
        super().__init__(message)


class RemoteAPIError(TorrentAPIError):
    """The API answered with an error other than expiry or "no results"."""

    def __init__(self, query: str, message: str, code: int):
        self.query = query
        self.message = message
        self.code = code
        super().__init__(
            f"query: {query}, Error: {message}, Error code: {code}"
        )


class UnknownResponseError(TorrentAPIError):
    """Response carried neither results nor an error."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"query: {query}, Unknown error")
