"""
Text rendering of playlist operation results.
"""

from typing import Dict, Any, List

from spotipy.exceptions import SpotifyException


def pluralize_tracks(count: int) -> str:
    return f"{count} track{'' if count == 1 else 's'}"


def format_playlist(info: Dict[str, Any]) -> str:
    """Render the result of PlaylistReader.get_playlist as markdown text."""
    visibility = "Public" if info["public"] else "Private"
    if info["collaborative"]:
        visibility += " | Collaborative"

    description = f"\n**Description**: {info['description']}" if info["description"] else ""

    return (
        f"# Playlist: \"{info['name']}\"\n\n"
        f"**Owner**: {info['owner']}\n"
        f"**Tracks**: {info['tracks_total']}\n"
        f"**Visibility**: {visibility}"
        f"{description}\n"
        f"**ID**: {info['id']}\n"
        f"**URL**: {info['url']}"
    )


def format_update(playlist_id: str, changes_made: List[str]) -> str:
    return (
        f"Successfully updated playlist (ID: {playlist_id})\n"
        f"Fields updated: {', '.join(changes_made)}"
    )


def format_removal(playlist_id: str, removed_count: int) -> str:
    return f"Successfully removed {pluralize_tracks(removed_count)} from playlist (ID: {playlist_id})"


def format_reorder(
    playlist_id: str,
    range_start: int,
    insert_before: int,
    moved_count: int
) -> str:
    return (
        f"Successfully moved {pluralize_tracks(moved_count)} from position {range_start} "
        f"to before position {insert_before} in playlist (ID: {playlist_id})"
    )


def error_message(error: Exception) -> str:
    """Human-readable message for an exception raised by a tool call."""
    if isinstance(error, SpotifyException) and error.msg:
        # spotipy prefixes the API message with "<request url>:\n"
        _, separator, message = error.msg.partition(":\n")
        return message.strip() if separator else error.msg.strip()
    return str(error)
