"""
Shared fixtures for Spotify Playlist MCP Server tests
"""

import os

# Set test environment before importing project modules
os.environ['SPOTIFY_CLIENT_ID'] = 'test_client_id'
os.environ['SPOTIFY_CLIENT_SECRET'] = 'test_client_secret'
os.environ['MCP_TRANSPORT'] = 'stdio'

import pytest
from unittest.mock import Mock

PLAYLIST_ID = "37i9dQZF1DXcBWIGoYBM5M"
TRACK_ID_1 = "4iV5W9uYEdYUVa79Axb7Rh"
TRACK_ID_2 = "1301WleyT98MSxVHPZCA6M"


@pytest.fixture
def mock_spotify():
    """spotipy.Spotify double"""
    spotify = Mock()
    spotify.playlist_change_details.return_value = None
    spotify.playlist_remove_all_occurrences_of_items.return_value = {"snapshot_id": "snap-2"}
    spotify.playlist_reorder_items.return_value = {"snapshot_id": "snap-3"}
    return spotify


@pytest.fixture
def mock_client(mock_spotify):
    """SpotifyClient double handing out the spotipy double"""
    client = Mock()
    client.get_client.return_value = mock_spotify
    return client


@pytest.fixture
def playlist_response():
    """Trimmed GET /playlists/{id} payload"""
    return {
        "id": PLAYLIST_ID,
        "name": "Today's Top Hits",
        "description": "The hottest 50.",
        "public": True,
        "collaborative": False,
        "snapshot_id": "snap-1",
        "owner": {"id": "spotify", "display_name": "Spotify"},
        "tracks": {"total": 50},
        "external_urls": {"spotify": f"https://open.spotify.com/playlist/{PLAYLIST_ID}"},
    }
