"""
Spotify API Client Manager
Builds the spotipy client lazily from configuration
"""

import logging
from typing import Optional

import spotipy
from spotipy.cache_handler import CacheFileHandler
from spotipy.oauth2 import SpotifyOAuth

from config import SpotifyAPIConfig, config

logger = logging.getLogger(__name__)


class SpotifyClient:
    """
    Owns the authenticated spotipy client used by the playlist tools.

    The client is created on first use so the server can start (and be
    tested) without Spotify credentials in the environment. Token
    refresh is delegated to spotipy's OAuth manager; the token cache must
    already hold a token since the server never prompts for authorization.
    """

    def __init__(self, api_config: Optional[SpotifyAPIConfig] = None):
        """
        Initialize Spotify client manager

        Args:
            api_config: Spotify API settings (defaults to global config)
        """
        self.api_config = api_config or config.spotify_api
        self.spotify: Optional[spotipy.Spotify] = None

    def get_client(self) -> spotipy.Spotify:
        """
        Get the authenticated spotipy client

        Returns:
            spotipy.Spotify instance

        Raises:
            RuntimeError: If credentials are missing, no token is cached,
                or the client cannot be built
        """
        if self.spotify:
            return self.spotify

        if not self.api_config.has_credentials:
            raise RuntimeError(
                "Spotify credentials not configured. "
                "Set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET."
            )

        try:
            auth_manager = SpotifyOAuth(
                client_id=self.api_config.client_id,
                client_secret=self.api_config.client_secret,
                redirect_uri=self.api_config.redirect_uri,
                scope=self.api_config.scope,
                cache_handler=CacheFileHandler(cache_path=self.api_config.cache_path),
                open_browser=False
            )
            cached_token = auth_manager.cache_handler.get_cached_token()
        except Exception as e:
            raise RuntimeError(f"Failed to initialize Spotify client: {e}") from e

        # Without a cached token spotipy falls back to an interactive prompt on
        # stdin/stdout, which is the MCP channel in stdio mode
        if not cached_token:
            raise RuntimeError(
                f"No Spotify token found in cache file '{self.api_config.cache_path}'. "
                "Authorize the application once with spotipy.SpotifyOAuth using the same "
                "client ID, redirect URI, scope and SPOTIFY_CACHE_PATH, then retry."
            )

        self.spotify = spotipy.Spotify(
            auth_manager=auth_manager,
            requests_timeout=self.api_config.requests_timeout
        )

        logger.info("✅ Spotify API client initialized")
        return self.spotify

    def is_configured(self) -> bool:
        """Check if client credentials are present"""
        return self.api_config.has_credentials
