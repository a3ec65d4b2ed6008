"""
Spotify MCP Server - Playlist Management Module
==============================================

This module provides playlist management capabilities:
- Reading playlist details
- Updating playlist details
- Removing tracks
- Reordering playlist items
"""

from .playlist_reader import PlaylistReader
from .playlist_updater import PlaylistUpdater
from .playlist_manager import PlaylistManager
from .playlist_reorderer import PlaylistReorderer

__all__ = [
    'PlaylistReader',
    'PlaylistUpdater',
    'PlaylistManager',
    'PlaylistReorderer',
]
