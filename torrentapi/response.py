"""Decoding and classification of API responses."""

import json

from .errors import DecodeError, RemoteAPIError, UnknownResponseError
from .log import get_logger
from .models import APIResponse, ProcessedResponse, ResponseKind, TorrentResult

ERR_CODE_TOKEN_EXPIRED = 4
ERR_CODE_NO_TORRENTS = 20


def decode_envelope(body: str, query: str = "") -> APIResponse:
    """Parse a raw response body into an envelope.

    Raises:
        DecodeError: If the body is not a JSON object.
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise DecodeError(str(e), query) from e

    if not isinstance(data, dict):
        raise DecodeError(f"expected an object, got {type(data).__name__}", query)

    try:
        return APIResponse.from_dict(data)
    except (TypeError, ValueError) as e:
        raise DecodeError(str(e), query) from e


def process_response(response: APIResponse, query: str = "") -> ProcessedResponse:
    """Classify an envelope.

    Returns a RESULTS, EMPTY or EXPIRED_TOKEN outcome. "No torrents found"
    is EMPTY with no results, not an error.

    Raises:
        DecodeError: If the results payload is malformed.
        RemoteAPIError: For any other API error.
        UnknownResponseError: If the envelope has neither results nor error.
    """
    if response.torrent_results is not None:
        return ProcessedResponse(
            ResponseKind.RESULTS, _decode_results(response.torrent_results, query)
        )

    if response.error:
        if response.error_code == ERR_CODE_TOKEN_EXPIRED:
            return ProcessedResponse(ResponseKind.EXPIRED_TOKEN)
        if response.error_code == ERR_CODE_NO_TORRENTS:
            get_logger().debug(f"No torrents found for query: {query}")
            return ProcessedResponse(ResponseKind.EMPTY)
        raise RemoteAPIError(query, response.error, response.error_code)

    raise UnknownResponseError(query)


def _decode_results(payload, query: str) -> list[TorrentResult]:
    if not isinstance(payload, list):
        raise DecodeError(
            f"torrent_results: expected a list, got {type(payload).__name__}",
            query,
        )
    try:
        return [TorrentResult.from_dict(item) for item in payload]
    except (TypeError, ValueError) as e:
        raise DecodeError(str(e), query) from e
