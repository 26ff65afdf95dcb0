#!/usr/bin/env python3
"""
Configuration management for the progression engine.

This module provides a GameConfig class for loading, managing, and accessing
configuration data from JSON files.
"""

import os
import json
import threading
from typing import Any, Dict, List, Optional, Tuple

from rpgcore.utils.logging_config import get_logger

# Get the module logger
logger = get_logger("SYSTEM")


class GameConfig:
    """
    Game configuration manager.

    Configuration is split into domains, one JSON file per domain. Values
    are read with dot notation (e.g., config.get("progression.rng_seed")).
    """

    # Singleton instance
    _instance = None
    _lock = threading.Lock()

    # Default configuration directory relative to project root
    _CONFIG_DIR = "config"

    # Configuration files, mapping domain to relative path within the config directory
    _DEFAULT_CONFIG_FILES = {
        "system": "system_config.json",
        "progression": "progression_config.json",
    }

    _DEFAULT_CONFIGS = {
        "system": {
            "log_level": "INFO",
            "log_to_file": False,
            "log_dir": "logs",
        },
        "progression": {
            "rng_seed": None,  # None seeds from OS entropy
        },
    }

    def __new__(cls, *args, **kwargs):
        """Ensure singleton pattern."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(GameConfig, cls).__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_dir: Optional[str] = None):
        """Initialize the configuration."""
        if self._initialized:
            return

        project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        # An absolute config_dir replaces the project root.
        self._config_dir_abs = os.path.join(project_root, config_dir or self._CONFIG_DIR)
        self._config_data: Dict[str, Dict[str, Any]] = {}

        self._load_all_configs()
        self._initialized = True

    @property
    def config_dir(self) -> str:
        return self._config_dir_abs

    def _load_all_configs(self) -> None:
        """Load all configuration files."""
        for domain, filename_rel in self._DEFAULT_CONFIG_FILES.items():
            self._load_config(domain, filename_rel)

    def _load_config(self, domain: str, filename_rel: str) -> None:
        """
        Load a configuration file for the specified domain.

        Missing files are created from the defaults. Keys absent from an
        existing file fall back to their default values.
        """
        file_path = os.path.join(self._config_dir_abs, filename_rel)
        defaults = dict(self._DEFAULT_CONFIGS.get(domain, {}))

        if not os.path.exists(file_path):
            logger.warning(f"Config file for '{domain}' not found. Creating default: {file_path}")
            self._config_data[domain] = defaults
            self._write_config(domain, file_path)
            return

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                loaded_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading configuration for domain '{domain}' from {file_path}: {e}")
            self._config_data[domain] = defaults
            return

        if not isinstance(loaded_data, dict):
            logger.warning(f"Configuration for domain '{domain}' is not a JSON object. Using defaults.")
            self._config_data[domain] = defaults
            return

        defaults.update(loaded_data)
        self._config_data[domain] = defaults
        logger.debug(f"Loaded configuration for domain '{domain}' from {file_path}")

    def _write_config(self, domain: str, file_path: str) -> bool:
        try:
            os.makedirs(os.path.dirname(file_path), exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(self._config_data[domain], f, indent=4)
            return True
        except OSError as e:
            logger.error(f"Error saving configuration for {domain} at {file_path}: {e}")
            return False

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: The path to the configuration value (e.g., "system.log_level").
            default: The default value to return if the key is not found.

        Returns:
            The configuration value, or the default if not found.
        """
        parts = key_path.split(".")
        domain = parts[0]

        if domain not in self._config_data:
            return default

        current: Any = self._config_data[domain]
        for part in parts[1:]:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def set(self, key_path: str, value: Any) -> bool:
        """
        Set a configuration value using dot notation and save the corresponding file.

        Returns:
            True if the value was set and saved successfully, False otherwise.
        """
        parts = key_path.split(".")
        domain = parts[0]

        if domain not in self._DEFAULT_CONFIG_FILES or len(parts) < 2:
            logger.error(f"Cannot set configuration '{key_path}': unknown domain '{domain}'.")
            return False

        current = self._config_data.setdefault(domain, {})
        for part in parts[1:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value
        logger.info(f"Set configuration '{key_path}' to: {value}")

        file_path = os.path.join(self._config_dir_abs, self._DEFAULT_CONFIG_FILES[domain])
        return self._write_config(domain, file_path)

    def get_all(self, domain: Optional[str] = None) -> Dict[str, Any]:
        """Get all configuration values for a domain, or all domains."""
        if domain is None:
            return {name: values.copy() for name, values in self._config_data.items()}

        if domain not in self._config_data:
            logger.warning(f"Domain '{domain}' not found in configuration")
            return {}

        return self._config_data[domain].copy()

    def reload(self, domain: Optional[str] = None) -> bool:
        """Reload configuration from files."""
        if domain is None:
            self._load_all_configs()
            logger.info("Reloaded all configurations.")
            return True

        if domain not in self._DEFAULT_CONFIG_FILES:
            logger.warning(f"Cannot reload unknown domain '{domain}'.")
            return False

        self._load_config(domain, self._DEFAULT_CONFIG_FILES[domain])
        logger.info(f"Reloaded configuration for domain '{domain}'.")
        return True

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Validate the configuration.

        Returns:
            A tuple of (is_valid, error_messages).
        """
        errors = []

        seed = self.get("progression.rng_seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            errors.append(f"progression.rng_seed must be an integer or null, got {seed!r}")

        level_name = self.get("system.log_level")
        if not isinstance(level_name, str) or level_name.upper() not in (
                "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"system.log_level is not a valid level name: {level_name!r}")

        for error in errors:
            logger.error(error)
        if not errors:
            logger.info("Configuration validation passed.")

        return not errors, errors


# Convenience functions

def get_config() -> GameConfig:
    """Get the game configuration singleton instance."""
    return GameConfig()


def peek_config() -> Optional[GameConfig]:
    """Return the configuration if it is already loaded, without creating it."""
    instance = GameConfig._instance
    if instance is None or not getattr(instance, "_initialized", False):
        return None
    return instance


def reset_config() -> None:
    """Drop the singleton so the next get_config() reloads from disk."""
    with GameConfig._lock:
        GameConfig._instance = None
