#!/usr/bin/env python3
"""
Utils package for Spotify Playlist MCP Server
Provides input validation utilities
"""

from .validators import (
    validator,
    ValidationError,
    validate_playlist_id,
    validate_track_ids,
    validate_position,
    validate_range_length,
    validate_snapshot_id
)

__all__ = [
    # Validators
    'validator',
    'ValidationError',
    'validate_playlist_id',
    'validate_track_ids',
    'validate_position',
    'validate_range_length',
    'validate_snapshot_id',
]
