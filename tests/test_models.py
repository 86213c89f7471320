"""Tests for torrentapi.models."""

import pytest

from torrentapi.models import APIResponse, EpisodeInfo, Token, TorrentResult

from .conftest import result_record


class TestToken:
    """Test cases for Token.is_valid."""

    def test_default_token_is_invalid(self):
        """Test that a fresh token is not usable."""
        assert not Token().is_valid()

    def test_empty_value_is_invalid_regardless_of_expiry(self):
        """Test that an empty value is invalid even far before expiry."""
        token = Token(value="", expires=10_000.0)
        assert not token.is_valid(now=0.0)

    def test_valid_before_expiry(self):
        token = Token(value="abc", expires=100.0)
        assert token.is_valid(now=99.999)

    def test_invalid_at_exact_expiry(self):
        """Test the boundary: the expiry instant itself is invalid."""
        token = Token(value="abc", expires=100.0)
        assert not token.is_valid(now=100.0)

    def test_invalid_after_expiry(self):
        token = Token(value="abc", expires=100.0)
        assert not token.is_valid(now=100.5)


class TestTorrentResult:
    """Test cases for TorrentResult.from_dict."""

    def test_full_record(self):
        result = TorrentResult.from_dict(result_record("Movie.2019.1080p"))

        assert result.title == "Movie.2019.1080p"
        assert result.filename == "Movie.2019.1080p.mkv"
        assert result.seeders == 10
        assert result.leechers == 2
        assert result.size == 1073741824
        assert result.ranked == 1
        assert result.episode_info.title == "Pilot"
        assert result.episode_info.seasonnum == "1"

    def test_missing_fields_default_to_empty(self):
        """Test that a plain json record only fills what it has."""
        result = TorrentResult.from_dict(
            {"filename": "a.mkv", "category": "Movies", "download": "magnet:?"}
        )

        assert result.title == ""
        assert result.seeders == 0
        assert result.size == 0
        assert result.episode_info == EpisodeInfo()

    def test_null_episode_info(self):
        result = TorrentResult.from_dict(result_record(episode_info=None))
        assert result.episode_info == EpisodeInfo()

    def test_name_prefers_filename(self):
        assert TorrentResult(title="t", filename="f").name == "f"
        assert TorrentResult(title="t").name == "t"

    def test_non_numeric_seeders_raises(self):
        with pytest.raises(ValueError):
            TorrentResult.from_dict(result_record(seeders="many"))

    def test_non_object_raises(self):
        with pytest.raises(TypeError):
            TorrentResult.from_dict(["not", "a", "record"])


class TestAPIResponse:
    """Test cases for APIResponse.from_dict."""

    def test_error_envelope(self):
        response = APIResponse.from_dict(
            {"error": "No results found", "error_code": 20}
        )

        assert response.torrent_results is None
        assert response.error == "No results found"
        assert response.error_code == 20

    def test_empty_envelope(self):
        response = APIResponse.from_dict({})

        assert response.torrent_results is None
        assert response.error == ""
        assert response.error_code == 0
