#!/usr/bin/env python3
"""
Configuration management for Spotify Playlist MCP Server
Centralized settings for the Spotify API client, validation limits and transport

Every setting resolves the same way: an explicit constructor argument wins,
otherwise the environment variable, otherwise the built-in default.
"""

import os
import logging
from pathlib import Path
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from dotenv import load_dotenv

# Find .env file in the same directory as this config.py file
config_dir = Path(__file__).parent
env_file = config_dir / ".env"
load_dotenv(dotenv_path=env_file)

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT_URI = "http://127.0.0.1:8888/callback"
DEFAULT_SCOPE = (
    "playlist-read-private playlist-read-collaborative "
    "playlist-modify-public playlist-modify-private"
)


def from_env(value: Optional[Any], env_var: str, default: Any) -> Any:
    """Resolve a setting: explicit value, then environment, then default"""
    if value is not None:
        return value
    env_val = os.getenv(env_var)
    if env_val is not None and env_val != "":
        return env_val
    return default


class SpotifyAPIConfig(BaseModel):
    """Spotify Web API configuration"""

    model_config = ConfigDict(validate_default=True)

    client_id: str = Field(
        default=None,
        description="Spotify application client ID (SPOTIFY_CLIENT_ID)"
    )

    client_secret: str = Field(
        default=None,
        description="Spotify application client secret (SPOTIFY_CLIENT_SECRET)"
    )

    redirect_uri: str = Field(
        default=None,
        description="Redirect URI registered for the Spotify application (SPOTIFY_REDIRECT_URI)"
    )

    scope: str = Field(
        default=None,
        description="OAuth scopes requested for playlist access (SPOTIFY_SCOPE)"
    )

    cache_path: str = Field(
        default=None,
        description="File holding the cached OAuth token (SPOTIFY_CACHE_PATH)"
    )

    requests_timeout: int = Field(
        default=None,
        description="API request timeout in seconds (SPOTIFY_REQUESTS_TIMEOUT)"
    )

    @field_validator('client_id', mode='before')
    @classmethod
    def set_client_id(cls, v):
        return from_env(v, "SPOTIFY_CLIENT_ID", "")

    @field_validator('client_secret', mode='before')
    @classmethod
    def set_client_secret(cls, v):
        return from_env(v, "SPOTIFY_CLIENT_SECRET", "")

    @field_validator('redirect_uri', mode='before')
    @classmethod
    def set_redirect_uri(cls, v):
        return from_env(v, "SPOTIFY_REDIRECT_URI", DEFAULT_REDIRECT_URI)

    @field_validator('scope', mode='before')
    @classmethod
    def set_scope(cls, v):
        return from_env(v, "SPOTIFY_SCOPE", DEFAULT_SCOPE)

    @field_validator('cache_path', mode='before')
    @classmethod
    def set_cache_path(cls, v):
        return from_env(v, "SPOTIFY_CACHE_PATH", ".spotify_cache")

    @field_validator('requests_timeout', mode='before')
    @classmethod
    def set_requests_timeout(cls, v):
        return int(from_env(v, "SPOTIFY_REQUESTS_TIMEOUT", 10))

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)


class ValidationConfig(BaseModel):
    """Input validation configuration"""

    max_tracks_per_request: int = Field(
        default=100,
        description="Maximum track IDs accepted by a single remove request"
    )


class ServerConfig(BaseModel):
    """Main server configuration"""

    model_config = ConfigDict(validate_default=True)

    transport: str = Field(
        default=None,
        description="Transport mode: stdio or http (MCP_TRANSPORT)"
    )

    host: str = Field(
        default=None,
        description="Server host for HTTP mode (HOST)"
    )

    port: int = Field(
        default=None,
        description="Server port for HTTP mode (PORT)"
    )

    log_level: str = Field(
        default=None,
        description="Logging level (LOG_LEVEL)"
    )

    @field_validator('transport', mode='before')
    @classmethod
    def set_transport(cls, v):
        transport = str(from_env(v, "MCP_TRANSPORT", "stdio")).lower()
        if transport not in ("stdio", "http"):
            raise ValueError(f"Invalid transport: {transport}. Must be 'stdio' or 'http'")
        return transport

    @field_validator('host', mode='before')
    @classmethod
    def set_host(cls, v):
        return from_env(v, "HOST", "0.0.0.0")

    @field_validator('port', mode='before')
    @classmethod
    def set_port(cls, v):
        return int(from_env(v, "PORT", 8080))

    @field_validator('log_level', mode='before')
    @classmethod
    def set_log_level(cls, v):
        level = str(from_env(v, "LOG_LEVEL", "INFO")).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            logger.warning(f"⚠️  Unknown log level '{level}', falling back to INFO")
            return "INFO"
        return level


class AppConfig(BaseModel):
    """Application-wide configuration"""

    model_config = ConfigDict(validate_assignment=True)

    spotify_api: SpotifyAPIConfig = Field(default_factory=SpotifyAPIConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


def get_config() -> AppConfig:
    """Build configuration from the current environment"""
    return AppConfig()


# Export config for easy import
config = get_config()
