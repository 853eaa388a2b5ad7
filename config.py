#!/usr/bin/env python3
"""
Configuration Module - Centralized configuration for Classroom AI Assistant

Loads and validates all configuration from environment variables.
"""

import os
from typing import Optional, List
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()

DEFAULT_TYPHOON_URL = "https://api.opentyphoon.ai/v1/chat/completions"
DEFAULT_TYPHOON_MODEL = "typhoon-v2.1-12b-instruct"


@dataclass
class GoogleConfig:
    """Google OAuth2 file locations."""
    credentials_file: str = "credentials.json"
    token_file: str = "token.json"

    def is_valid(self) -> bool:
        return os.path.exists(self.token_file) or os.path.exists(self.credentials_file)


@dataclass
class TyphoonConfig:
    """Typhoon chat-completions API configuration."""
    api_key: str = ""
    api_url: str = DEFAULT_TYPHOON_URL
    model: str = DEFAULT_TYPHOON_MODEL
    timeout: Optional[float] = None  # seconds, None = wait indefinitely
    timeout_setting: str = ""  # raw TYPHOON_TIMEOUT value

    def is_valid(self) -> bool:
        return bool(self.api_key and self.api_url)


@dataclass
class LoggingConfig:
    """Log output configuration."""
    level: str = "WARNING"


@dataclass
class Config:
    """Main configuration container."""
    google: GoogleConfig = field(default_factory=GoogleConfig)
    typhoon: TyphoonConfig = field(default_factory=TyphoonConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        return None


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Returns:
        Config object with all settings
    """
    config = Config()

    # Google
    config.google.credentials_file = os.getenv("GOOGLE_CREDENTIALS_FILE", "credentials.json")
    config.google.token_file = os.getenv("GOOGLE_TOKEN_FILE", "token.json")

    # Typhoon
    config.typhoon.api_key = os.getenv("TYPHOON_API_KEY", "")
    config.typhoon.api_url = os.getenv("TYPHOON_API_URL", DEFAULT_TYPHOON_URL)
    config.typhoon.model = os.getenv("TYPHOON_MODEL", DEFAULT_TYPHOON_MODEL)
    config.typhoon.timeout_setting = os.getenv("TYPHOON_TIMEOUT", "")
    config.typhoon.timeout = _optional_float(config.typhoon.timeout_setting)

    # Logging
    config.logging.level = os.getenv("LOG_LEVEL", "WARNING").upper()

    return config


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration and return list of errors.

    Args:
        config: Config object to validate

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not config.google.is_valid():
        errors.append(
            f"Google credentials not found ({config.google.credentials_file} "
            f"or {config.google.token_file} required)"
        )

    if not config.typhoon.is_valid():
        errors.append("Typhoon API not configured (TYPHOON_API_KEY required)")

    if config.typhoon.timeout_setting.strip() and config.typhoon.timeout is None:
        errors.append(
            f"TYPHOON_TIMEOUT must be a number of seconds "
            f"(got '{config.typhoon.timeout_setting}'), using no timeout"
        )

    return errors


def print_config_status(config: Config):
    """Print configuration status for debugging."""
    print("Configuration Status")
    print("=" * 50)

    # Google
    print(f"\nGoogle OAuth:")
    print(f"  Client Secrets: {config.google.credentials_file}")
    print(f"  Token File: {config.google.token_file}")
    print(f"  Token Saved: {os.path.exists(config.google.token_file)}")
    print(f"  Status: {'OK' if config.google.is_valid() else 'MISSING'}")

    # Typhoon
    print(f"\nTyphoon AI:")
    print(f"  URL: {config.typhoon.api_url}")
    print(f"  Model: {config.typhoon.model}")
    print(f"  Key: {'*' * 20}..." if config.typhoon.api_key else "  Key: NOT SET")
    print(f"  Timeout: {config.typhoon.timeout or 'none'}")
    print(f"  Status: {'OK' if config.typhoon.is_valid() else 'NOT CONFIGURED'}")

    # Logging
    print(f"\nLogging:")
    print(f"  Level: {config.logging.level}")


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object (loaded on first call)
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


# =============================================================================
# MAIN (for testing)
# =============================================================================

if __name__ == "__main__":
    config = get_config()
    print_config_status(config)

    errors = validate_config(config)
    if errors:
        print("\nConfiguration Errors:")
        for error in errors:
            print(f"  - {error}")
    else:
        print("\nConfiguration is valid!")
