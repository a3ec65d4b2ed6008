"""
Spotify MCP Server - Playlist Reorderer
======================================

Handles reordering tracks within playlists by moving a range of
consecutive items in front of another position.
"""

from typing import Dict, Any, Optional
from spotipy.exceptions import SpotifyException
import logging

from utils.validators import (
    validate_playlist_id,
    validate_position,
    validate_range_length,
    validate_snapshot_id
)

logger = logging.getLogger(__name__)


class PlaylistReorderer:
    """
    Reorders tracks within Spotify playlists.
    """

    def __init__(self, client):
        """
        Initialize PlaylistReorderer.

        Args:
            client: SpotifyClient providing the authenticated spotipy client
        """
        self.client = client
        logger.info("PlaylistReorderer initialized")

    def reorder_items(
        self,
        playlist_id: str,
        range_start: int,
        insert_before: int,
        range_length: Optional[int] = None,
        snapshot_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Move a range of tracks to a new position in the playlist.

        Args:
            playlist_id: Spotify playlist ID, URI or URL
            range_start: Position of the first item to move (0-based)
            insert_before: Position the items are inserted before (0-based)
            range_length: Number of consecutive items to move (default 1)
            snapshot_id: Playlist version to target (optional)

        Returns:
            Dictionary containing:
            - playlist_id: Playlist ID
            - range_start: First moved position
            - insert_before: Insert position
            - moved_count: Number of items moved
            - snapshot_id: Playlist version after the move

        Raises:
            ValidationError: If validation fails
            SpotifyException: If API request fails

        Example:
            ```python
            reorderer = PlaylistReorderer(spotify_client)

            # Move the 5th and 6th tracks to the top
            result = reorderer.reorder_items(
                playlist_id="37i9dQZF1DXcBWIGoYBM5M",
                range_start=4,
                insert_before=0,
                range_length=2
            )
            ```
        """
        playlist_id = validate_playlist_id(playlist_id)
        range_start = validate_position(range_start, "range_start")
        insert_before = validate_position(insert_before, "insert_before")
        range_length = validate_range_length(range_length)
        snapshot_id = validate_snapshot_id(snapshot_id)

        moved_count = range_length or 1
        logger.info(
            f"Moving {moved_count} items in playlist {playlist_id}: "
            f"{range_start} → before {insert_before}"
        )

        try:
            response = self.client.get_client().playlist_reorder_items(
                playlist_id,
                range_start=range_start,
                insert_before=insert_before,
                range_length=moved_count,
                snapshot_id=snapshot_id
            )
        except SpotifyException as e:
            logger.error(f"Failed to reorder playlist {playlist_id}: {e}")
            raise

        logger.info(f"✅ Playlist reordered: {playlist_id}")
        return {
            "playlist_id": playlist_id,
            "range_start": range_start,
            "insert_before": insert_before,
            "moved_count": moved_count,
            "snapshot_id": response.get("snapshot_id") if isinstance(response, dict) else None
        }
