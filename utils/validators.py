#!/usr/bin/env python3
"""
Input validation for Spotify Playlist MCP Server
Validates and normalizes all tool inputs before they reach the Spotify API
"""

import re
import logging
from typing import List, Optional
from urllib.parse import urlparse

from config import config

logger = logging.getLogger(__name__)

# Spotify IDs are base62 strings of 22 characters
SPOTIFY_ID_PATTERN = re.compile(r'^[A-Za-z0-9]{22}$')


class ValidationError(Exception):
    """Custom exception for validation errors"""
    pass


class InputValidator:
    """Validates and normalizes user inputs"""

    def __init__(self):
        """Initialize validator with config"""
        self.max_tracks_per_request = config.validation.max_tracks_per_request

    def extract_spotify_id(self, value: str, kind: str) -> str:
        """
        Extract a Spotify ID from a bare ID, a spotify: URI or an open.spotify.com URL

        Args:
            value: ID, URI or URL supplied by the caller
            kind: Resource type, e.g. "playlist" or "track"

        Returns:
            Bare Spotify ID

        Raises:
            ValidationError: If no valid ID can be extracted
        """
        label = kind.capitalize()
        if not value or not isinstance(value, str):
            raise ValidationError(f"{label} ID is required")

        value = value.strip()

        if SPOTIFY_ID_PATTERN.match(value):
            return value

        # spotify:playlist:ID / spotify:track:ID
        prefix = f"spotify:{kind}:"
        if value.startswith(prefix):
            candidate = value[len(prefix):]
            if SPOTIFY_ID_PATTERN.match(candidate):
                return candidate

        # https://open.spotify.com/playlist/ID?si=...
        parsed = urlparse(value)
        if parsed.hostname == 'open.spotify.com':
            parts = [part for part in parsed.path.split('/') if part]
            if kind in parts:
                index = parts.index(kind)
                if index + 1 < len(parts) and SPOTIFY_ID_PATTERN.match(parts[index + 1]):
                    return parts[index + 1]

        raise ValidationError(
            f"Invalid Spotify {kind} ID: {value[:50]}. "
            f"Expected a 22-character ID, spotify:{kind}:ID or an open.spotify.com {kind} URL"
        )

    def validate_playlist_id(self, playlist_id: str) -> str:
        """Validate playlist ID, URI or URL and return the bare ID"""
        return self.extract_spotify_id(playlist_id, "playlist")

    def validate_track_ids(self, track_ids: List[str]) -> List[str]:
        """
        Validate track IDs and convert them to track URIs

        Args:
            track_ids: Track IDs (or URIs/URLs) to act on

        Returns:
            List of spotify:track: URIs in the given order

        Raises:
            ValidationError: If the list is empty, too long or holds an invalid ID
        """
        if not isinstance(track_ids, (list, tuple)):
            raise ValidationError("track_ids must be a list of Spotify track IDs")

        if not track_ids:
            raise ValidationError("At least one track ID is required")

        if len(track_ids) > self.max_tracks_per_request:
            raise ValidationError(
                f"Too many tracks: {len(track_ids)} "
                f"(max {self.max_tracks_per_request} per request)"
            )

        return [
            f"spotify:track:{self.extract_spotify_id(track_id, 'track')}"
            for track_id in track_ids
        ]

    def validate_position(self, value: int, name: str) -> int:
        """
        Validate a 0-based playlist position

        Raises:
            ValidationError: If value is not a non-negative integer
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{name} must be an integer, got: {type(value).__name__}")

        if value < 0:
            raise ValidationError(f"{name} must be non-negative")

        return value

    def validate_range_length(self, range_length: Optional[int]) -> Optional[int]:
        """Validate optional number of consecutive items to move"""
        if range_length is None:
            return None

        if isinstance(range_length, bool) or not isinstance(range_length, int):
            raise ValidationError(
                f"range_length must be an integer, got: {type(range_length).__name__}"
            )

        if range_length < 1:
            raise ValidationError("range_length must be at least 1")

        return range_length

    def validate_snapshot_id(self, snapshot_id: Optional[str]) -> Optional[str]:
        """Normalize optional snapshot ID; blank values are treated as absent"""
        if snapshot_id is None:
            return None

        if not isinstance(snapshot_id, str):
            raise ValidationError("snapshot_id must be a string")

        return snapshot_id.strip() or None


# Global validator instance
validator = InputValidator()


# Convenience functions for easy import
def validate_playlist_id(playlist_id: str) -> str:
    """Validate playlist ID"""
    return validator.validate_playlist_id(playlist_id)


def validate_track_ids(track_ids: List[str]) -> List[str]:
    """Validate track IDs and build track URIs"""
    return validator.validate_track_ids(track_ids)


def validate_position(value: int, name: str) -> int:
    """Validate playlist position"""
    return validator.validate_position(value, name)


def validate_range_length(range_length: Optional[int]) -> Optional[int]:
    """Validate range length"""
    return validator.validate_range_length(range_length)


def validate_snapshot_id(snapshot_id: Optional[str]) -> Optional[str]:
    """Validate snapshot ID"""
    return validator.validate_snapshot_id(snapshot_id)
