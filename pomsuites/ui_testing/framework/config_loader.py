"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - Hierarchical YAML configuration loading
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access
    - Default value support
    - Typed snapshot of the UI run settings (UISettings)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

# Defaults for a test run when neither YAML nor environment provide a value
DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_REMOTE_URL = ""
DEFAULT_BROWSER = "chromium"
DEFAULT_HEADLESS = True
DEFAULT_TIMEOUT_MS = 10000


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url", "http://localhost:3000")
        'https://staging.example.com'  # From YAML or env var

        >>> config.get("ui.timeout", 10000)
        10000  # Default value if not configured

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - ui.remote_url -> UI_REMOTE_URL
        - ui.browser -> UI_BROWSER
        - ui.headless -> UI_HEADLESS
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton pattern - return existing instance if available."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        # Check environment variable first
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default, env_key)

        # Navigate YAML config by dot notation
        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any, env_key: str = "") -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.

        Raises:
            ConfigurationError: If a numeric value cannot be parsed
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, (int, float)):
            try:
                return type(reference)(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid {type(reference).__name__} for {env_key or 'setting'}: {value!r}"
                ) from e

        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (used by tests)."""
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class UISettings:
    """
    Snapshot of the settings that drive one UI test run.

    Attributes:
        base_url: Application under test
        remote_url: Remote browser server websocket endpoint; empty launches locally
        browser: Browser name, resolved through `capabilities_for()`
        headless: Launch the local browser without a window
        timeout: Default driver timeout in milliseconds
    """
    base_url: str = DEFAULT_BASE_URL
    remote_url: str = DEFAULT_REMOTE_URL
    browser: str = DEFAULT_BROWSER
    headless: bool = DEFAULT_HEADLESS
    timeout: int = DEFAULT_TIMEOUT_MS

    @classmethod
    def from_config(cls, loader: Optional[ConfigLoader] = None) -> "UISettings":
        """Build settings from the config loader (env > YAML > defaults)."""
        config = loader or ConfigLoader()
        return cls(
            base_url=config.get("ui.base_url", DEFAULT_BASE_URL).rstrip("/"),
            remote_url=config.get("ui.remote_url", DEFAULT_REMOTE_URL),
            browser=config.get("ui.browser", DEFAULT_BROWSER),
            headless=config.get("ui.headless", DEFAULT_HEADLESS),
            timeout=config.get("ui.timeout", DEFAULT_TIMEOUT_MS),
        )


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
]
