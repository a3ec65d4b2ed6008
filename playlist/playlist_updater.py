"""
Spotify MCP Server - Playlist Updater
====================================

Handles updating details of existing Spotify playlists.

Features:
- Rename a playlist
- Set or clear the description
- Toggle public / private
- Toggle collaborative
"""

from typing import Dict, Any, Optional
from spotipy.exceptions import SpotifyException
import logging

from utils.validators import ValidationError, validate_playlist_id

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "public", "collaborative")


class PlaylistUpdater:
    """
    Updates details of existing Spotify playlists.

    Only the fields passed in are sent to Spotify; everything else is left
    unchanged on the server side.
    """

    def __init__(self, client):
        """
        Initialize PlaylistUpdater.

        Args:
            client: SpotifyClient providing the authenticated spotipy client
        """
        self.client = client
        logger.info("PlaylistUpdater initialized")

    def update_playlist(
        self,
        playlist_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        public: Optional[bool] = None,
        collaborative: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        Update playlist details.

        An empty name counts as "not provided". An empty description is
        sent as-is and clears the description.

        Args:
            playlist_id: Spotify playlist ID, URI or URL
            name: New name
            description: New description
            public: Whether the playlist should be public
            collaborative: Whether the playlist should be collaborative
                (Spotify requires the playlist to be private)

        Returns:
            Dictionary containing:
            - playlist_id: Updated playlist ID
            - changes_made: Names of the fields sent, in the order
              name, description, public, collaborative

        Raises:
            ValidationError: If no field is provided or the playlist ID is invalid
            SpotifyException: If API request fails

        Example:
            ```python
            updater = PlaylistUpdater(spotify_client)
            result = updater.update_playlist(
                playlist_id="37i9dQZF1DXcBWIGoYBM5M",
                name="Road Trip",
                public=False
            )
            print(f"Updated fields: {result['changes_made']}")
            ```
        """
        body = self._build_body(name, description, public, collaborative)
        if not body:
            raise ValidationError(
                "At least one field to update must be provided "
                f"({', '.join(UPDATABLE_FIELDS)})"
            )

        playlist_id = validate_playlist_id(playlist_id)

        changes_made = list(body.keys())
        logger.info(f"Updating playlist {playlist_id}: {', '.join(changes_made)}")

        try:
            self.client.get_client().playlist_change_details(playlist_id, **body)
        except SpotifyException as e:
            logger.error(f"Failed to update playlist {playlist_id}: {e}")
            raise

        logger.info(f"✅ Playlist updated successfully: {playlist_id}")
        return {
            "playlist_id": playlist_id,
            "changes_made": changes_made
        }

    @staticmethod
    def _build_body(
        name: Optional[str],
        description: Optional[str],
        public: Optional[bool],
        collaborative: Optional[bool]
    ) -> Dict[str, Any]:
        """Collect provided fields in a fixed order."""
        body: Dict[str, Any] = {}
        if name:
            body["name"] = name
        if description is not None:
            body["description"] = description
        if public is not None:
            body["public"] = public
        if collaborative is not None:
            body["collaborative"] = collaborative
        return body
