"""
Spotify MCP Server - Playlist Reader
===================================

Fetches playlist metadata from Spotify and reduces it to the fields the
tools report: owner, track count, visibility, description and links.
"""

from typing import Dict, Any, Optional
from spotipy.exceptions import SpotifyException
import logging

from utils.validators import validate_playlist_id

logger = logging.getLogger(__name__)


class PlaylistReader:
    """
    Reads metadata of Spotify playlists.
    """

    def __init__(self, client):
        """
        Initialize PlaylistReader.

        Args:
            client: SpotifyClient providing the authenticated spotipy client
        """
        self.client = client
        logger.info("PlaylistReader initialized")

    def get_playlist(self, playlist_id: str) -> Dict[str, Any]:
        """
        Get playlist details.

        Args:
            playlist_id: Spotify playlist ID, URI or URL

        Returns:
            Dictionary containing:
            - id: Playlist ID
            - name: Playlist name
            - owner: Owner display name, owner ID, or "Unknown"
            - tracks_total: Number of tracks (0 when not reported)
            - public: Whether the playlist is public
            - collaborative: Whether the playlist is collaborative
            - description: Description text (may be empty)
            - url: open.spotify.com link (may be empty)
            - snapshot_id: Current playlist version

        Raises:
            ValidationError: If the playlist ID is invalid
            SpotifyException: If API request fails

        Example:
            ```python
            reader = PlaylistReader(spotify_client)
            info = reader.get_playlist("37i9dQZF1DXcBWIGoYBM5M")
            print(f"{info['name']} has {info['tracks_total']} tracks")
            ```
        """
        playlist_id = validate_playlist_id(playlist_id)
        logger.info(f"Fetching playlist {playlist_id}")

        try:
            playlist = self.client.get_client().playlist(playlist_id)
        except SpotifyException as e:
            logger.error(f"Failed to fetch playlist {playlist_id}: {e}")
            raise

        owner = playlist.get("owner") or {}
        tracks = playlist.get("tracks") or {}
        external_urls = playlist.get("external_urls") or {}

        return {
            "id": playlist.get("id", playlist_id),
            "name": playlist.get("name"),
            "owner": self._owner_name(owner),
            "tracks_total": tracks.get("total") or 0,
            "public": bool(playlist.get("public")),
            "collaborative": bool(playlist.get("collaborative")),
            "description": playlist.get("description") or "",
            "url": external_urls.get("spotify") or "",
            "snapshot_id": playlist.get("snapshot_id"),
        }

    @staticmethod
    def _owner_name(owner: Dict[str, Any]) -> str:
        display_name: Optional[str] = owner.get("display_name")
        if display_name is not None:
            return display_name
        if owner.get("id") is not None:
            return owner["id"]
        return "Unknown"
