"""
Spotify MCP Server - Playlist Manager
====================================

Manages the tracks contained in Spotify playlists.

Features:
- Remove up to 100 tracks per request
- Accept bare track IDs, spotify:track: URIs or open.spotify.com links
- Target a specific playlist version through its snapshot ID
"""

from typing import Dict, Any, List, Optional
from spotipy.exceptions import SpotifyException
import logging

from utils.validators import (
    validate_playlist_id,
    validate_track_ids,
    validate_snapshot_id
)

logger = logging.getLogger(__name__)


class PlaylistManager:
    """
    Manages tracks within Spotify playlists.
    """

    def __init__(self, client):
        """
        Initialize PlaylistManager.

        Args:
            client: SpotifyClient providing the authenticated spotipy client
        """
        self.client = client
        logger.info("PlaylistManager initialized")

    def remove_tracks(
        self,
        playlist_id: str,
        track_ids: List[str],
        snapshot_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Remove tracks from a playlist.

        Every occurrence of each track is removed.

        Args:
            playlist_id: Spotify playlist ID, URI or URL
            track_ids: Track IDs to remove (1-100)
            snapshot_id: Playlist version to target (optional)

        Returns:
            Dictionary containing:
            - playlist_id: Playlist ID
            - removed_count: Number of track IDs sent
            - track_uris: Track URIs sent to Spotify
            - snapshot_id: Playlist version after the removal

        Raises:
            ValidationError: If validation fails
            SpotifyException: If API request fails

        Example:
            ```python
            manager = PlaylistManager(spotify_client)
            result = manager.remove_tracks(
                playlist_id="37i9dQZF1DXcBWIGoYBM5M",
                track_ids=["4iV5W9uYEdYUVa79Axb7Rh"]
            )
            ```
        """
        playlist_id = validate_playlist_id(playlist_id)
        track_uris = validate_track_ids(track_ids)
        snapshot_id = validate_snapshot_id(snapshot_id)

        logger.info(f"Removing {len(track_uris)} tracks from playlist {playlist_id}")

        try:
            response = self.client.get_client().playlist_remove_all_occurrences_of_items(
                playlist_id,
                track_uris,
                snapshot_id=snapshot_id
            )
        except SpotifyException as e:
            logger.error(f"Failed to remove tracks from playlist {playlist_id}: {e}")
            raise

        new_snapshot = response.get("snapshot_id") if isinstance(response, dict) else None
        logger.info(f"✅ Removed {len(track_uris)} tracks from playlist {playlist_id}")

        return {
            "playlist_id": playlist_id,
            "removed_count": len(track_uris),
            "track_uris": track_uris,
            "snapshot_id": new_snapshot
        }
