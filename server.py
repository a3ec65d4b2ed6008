#!/usr/bin/env python3
"""
Spotify Playlist MCP Server
A Model Context Protocol server for managing Spotify playlists.

Provides tools for:
- Playlist details
- Updating playlist name, description and visibility
- Removing tracks
- Reordering tracks

Every tool returns plain text: either a summary of what happened or an
error message. Spotify failures never escape as MCP protocol errors.
"""

import logging
from typing import Optional, List

from fastmcp import FastMCP

from spotify_client import SpotifyClient
from config import config
from utils import ValidationError
from playlist import (
    PlaylistReader,
    PlaylistUpdater,
    PlaylistManager,
    PlaylistReorderer
)
from playlist.formatting import (
    format_playlist,
    format_update,
    format_removal,
    format_reorder,
    error_message
)

# Setup logging
logging.basicConfig(
    level=getattr(logging, config.server.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("Spotify Playlist MCP Server")

# The spotipy client itself is built on the first tool call
spotify_client = SpotifyClient()
if not spotify_client.is_configured():
    logger.warning("⚠️  SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET not set - tool calls will fail")

playlist_reader = PlaylistReader(spotify_client)
playlist_updater = PlaylistUpdater(spotify_client)
playlist_manager = PlaylistManager(spotify_client)
playlist_reorderer = PlaylistReorderer(spotify_client)
logger.info("Playlist management modules initialized successfully")


# ============================================================================
# MCP TOOLS
# ============================================================================

@mcp.tool()
def get_playlist(playlist_id: str) -> str:
    """
    Get details of a specific Spotify playlist including tracks count, description and owner.

    Args:
        playlist_id: The Spotify ID of the playlist

    Example:
        get_playlist(playlist_id="37i9dQZF1DXcBWIGoYBM5M")
    """
    try:
        info = playlist_reader.get_playlist(playlist_id)
        return format_playlist(info)

    except ValidationError as e:
        return f"Error: {e}"
    except Exception as e:
        logger.error(f"Failed to get playlist: {e}")
        return f"Error getting playlist: {error_message(e)}"


@mcp.tool()
def update_playlist(
    playlist_id: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    public: Optional[bool] = None,
    collaborative: Optional[bool] = None
) -> str:
    """
    Update the details of a Spotify playlist (name, description, public/private, collaborative).

    Args:
        playlist_id: The Spotify ID of the playlist
        name: New name for the playlist
        description: New description for the playlist
        public: Whether the playlist should be public
        collaborative: Whether the playlist should be collaborative (requires public to be false)

    Example:
        update_playlist(
            playlist_id="37i9dQZF1DXcBWIGoYBM5M",
            name="Road Trip",
            public=False
        )
    """
    try:
        result = playlist_updater.update_playlist(
            playlist_id=playlist_id,
            name=name,
            description=description,
            public=public,
            collaborative=collaborative
        )
        return format_update(result["playlist_id"], result["changes_made"])

    except ValidationError as e:
        return f"Error: {e}"
    except Exception as e:
        logger.error(f"Failed to update playlist: {e}")
        return f"Error updating playlist: {error_message(e)}"


@mcp.tool()
def remove_tracks_from_playlist(
    playlist_id: str,
    track_ids: List[str],
    snapshot_id: Optional[str] = None
) -> str:
    """
    Remove one or more tracks from a Spotify playlist (max 100 tracks per request).

    Args:
        playlist_id: The Spotify ID of the playlist
        track_ids: Array of Spotify track IDs to remove (max 100)
        snapshot_id: The playlist snapshot ID to target a specific version (optional)

    Example:
        remove_tracks_from_playlist(
            playlist_id="37i9dQZF1DXcBWIGoYBM5M",
            track_ids=["4iV5W9uYEdYUVa79Axb7Rh", "1301WleyT98MSxVHPZCA6M"]
        )
    """
    try:
        result = playlist_manager.remove_tracks(
            playlist_id=playlist_id,
            track_ids=track_ids,
            snapshot_id=snapshot_id
        )
        return format_removal(result["playlist_id"], result["removed_count"])

    except ValidationError as e:
        return f"Error: {e}"
    except Exception as e:
        logger.error(f"Failed to remove tracks from playlist: {e}")
        return f"Error removing tracks from playlist: {error_message(e)}"


@mcp.tool()
def reorder_playlist_items(
    playlist_id: str,
    range_start: int,
    insert_before: int,
    range_length: Optional[int] = None,
    snapshot_id: Optional[str] = None
) -> str:
    """
    Reorder a range of tracks within a Spotify playlist by moving them to a new position.

    Args:
        playlist_id: The Spotify ID of the playlist
        range_start: The position of the first item to move (0-based index)
        insert_before: The position where the items should be inserted (0-based index)
        range_length: Number of consecutive items to move (defaults to 1)
        snapshot_id: The playlist snapshot ID to target a specific version (optional)

    Example:
        reorder_playlist_items(
            playlist_id="37i9dQZF1DXcBWIGoYBM5M",
            range_start=4,
            insert_before=0  # Move to top
        )
    """
    try:
        result = playlist_reorderer.reorder_items(
            playlist_id=playlist_id,
            range_start=range_start,
            insert_before=insert_before,
            range_length=range_length,
            snapshot_id=snapshot_id
        )
        return format_reorder(
            result["playlist_id"],
            result["range_start"],
            result["insert_before"],
            result["moved_count"]
        )

    except ValidationError as e:
        return f"Error: {e}"
    except Exception as e:
        logger.error(f"Failed to reorder playlist items: {e}")
        return f"Error reordering playlist items: {error_message(e)}"


# ============================================================================
# SERVER INITIALIZATION
# ============================================================================

def main():
    logger.info("Starting Spotify Playlist MCP Server")
    logger.info(f"Transport: {config.server.transport}")

    if config.server.transport == "http":
        logger.info(f"🚀 Starting in HTTP mode on {config.server.host}:{config.server.port}")
        mcp.run(
            transport="streamable-http",
            host=config.server.host,
            port=config.server.port
        )
    else:
        logger.info("🚀 Starting in stdio mode (local)")
        mcp.run()


if __name__ == "__main__":
    main()
