#!/usr/bin/env python3
"""
Tests for the Spotify client manager and configuration
"""

import pytest
from unittest.mock import patch

import server
from config import DEFAULT_REDIRECT_URI, SpotifyAPIConfig, ServerConfig
from spotify_client import SpotifyClient
from tests.conftest import PLAYLIST_ID


class TestSpotifyClient:
    """Test lazy spotipy client construction"""

    def test_missing_credentials(self, monkeypatch):
        monkeypatch.delenv("SPOTIFY_CLIENT_ID", raising=False)
        monkeypatch.delenv("SPOTIFY_CLIENT_SECRET", raising=False)
        client = SpotifyClient(SpotifyAPIConfig())

        assert client.is_configured() is False
        with pytest.raises(RuntimeError, match="credentials not configured"):
            client.get_client()

    @patch('spotify_client.spotipy.Spotify')
    @patch('spotify_client.SpotifyOAuth')
    def test_builds_client_once(self, mock_oauth, mock_spotify_cls):
        api_config = SpotifyAPIConfig(client_id="id", client_secret="secret", cache_path="/tmp/token")
        client = SpotifyClient(api_config)

        first = client.get_client()
        second = client.get_client()

        assert first is second
        mock_spotify_cls.assert_called_once_with(
            auth_manager=mock_oauth.return_value,
            requests_timeout=api_config.requests_timeout
        )
        _, kwargs = mock_oauth.call_args
        assert kwargs["client_id"] == "id"
        assert kwargs["client_secret"] == "secret"
        assert kwargs["open_browser"] is False

    def test_empty_token_cache_does_not_prompt(self, tmp_path):
        api_config = SpotifyAPIConfig(
            client_id="id",
            client_secret="secret",
            cache_path=str(tmp_path / "missing_token")
        )
        client = SpotifyClient(api_config)

        with patch("builtins.input") as mock_input:
            with pytest.raises(RuntimeError, match="No Spotify token found in cache file"):
                client.get_client()

        mock_input.assert_not_called()
        assert client.spotify is None

    def test_empty_token_cache_reported_by_tool(self, tmp_path):
        api_config = SpotifyAPIConfig(
            client_id="id",
            client_secret="secret",
            cache_path=str(tmp_path / "missing_token")
        )
        get_playlist = getattr(server.get_playlist, "fn", server.get_playlist)

        with patch.object(server.playlist_reader, "client", SpotifyClient(api_config)), \
                patch("builtins.input") as mock_input:
            result = get_playlist(PLAYLIST_ID)

        mock_input.assert_not_called()
        assert result.startswith("Error getting playlist: No Spotify token found")

    @patch('spotify_client.SpotifyOAuth', side_effect=ValueError("bad redirect"))
    def test_build_failure_wrapped(self, _mock_oauth):
        client = SpotifyClient(SpotifyAPIConfig(client_id="id", client_secret="secret"))

        with pytest.raises(RuntimeError, match="Failed to initialize Spotify client: bad redirect"):
            client.get_client()


class TestConfig:
    """Test environment-driven configuration"""

    def test_credentials_from_env(self, monkeypatch):
        monkeypatch.setenv("SPOTIFY_CLIENT_ID", "env-id")
        monkeypatch.setenv("SPOTIFY_CLIENT_SECRET", "env-secret")

        api_config = SpotifyAPIConfig()

        assert api_config.client_id == "env-id"
        assert api_config.has_credentials is True

    def test_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("SPOTIFY_REQUESTS_TIMEOUT", "30")

        assert SpotifyAPIConfig().requests_timeout == 30

    def test_explicit_value_beats_env(self, monkeypatch):
        monkeypatch.setenv("SPOTIFY_REDIRECT_URI", "http://env.example/callback")
        monkeypatch.setenv("SPOTIFY_CACHE_PATH", "/env/token")
        monkeypatch.setenv("PORT", "7000")

        api_config = SpotifyAPIConfig(
            redirect_uri="http://explicit.example/callback",
            cache_path="/explicit/token"
        )

        assert api_config.redirect_uri == "http://explicit.example/callback"
        assert api_config.cache_path == "/explicit/token"
        assert ServerConfig(port=9000).port == 9000

    def test_env_beats_default(self, monkeypatch):
        monkeypatch.setenv("SPOTIFY_REDIRECT_URI", "http://env.example/callback")
        monkeypatch.setenv("PORT", "7000")

        assert SpotifyAPIConfig().redirect_uri == "http://env.example/callback"
        assert ServerConfig().port == 7000

    def test_empty_env_uses_default(self, monkeypatch):
        monkeypatch.setenv("SPOTIFY_REDIRECT_URI", "")

        assert SpotifyAPIConfig().redirect_uri == DEFAULT_REDIRECT_URI

    def test_server_defaults(self, monkeypatch):
        monkeypatch.delenv("MCP_TRANSPORT", raising=False)
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        server_config = ServerConfig()

        assert server_config.transport == "stdio"
        assert server_config.port == 8080
        assert server_config.log_level == "INFO"

    def test_invalid_transport(self, monkeypatch):
        monkeypatch.setenv("MCP_TRANSPORT", "carrier-pigeon")

        with pytest.raises(ValueError):
            ServerConfig()

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        assert ServerConfig().log_level == "INFO"
