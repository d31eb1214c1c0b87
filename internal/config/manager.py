"""
Configuration management for Markdown Tag Finder.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

logger = logging.getLogger(__name__)

DEFAULT_TAGGER_CONFIG: Dict[str, Any] = {
    "format": "json",
    "encoding": "utf-8",
}


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholder with its value.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the environment variable or the original placeholder
             if the variable is not set.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ${VAR_NAME} placeholders in configuration values.

    Strings get placeholders replaced, dicts and lists are processed
    item by item, other values are returned unchanged.
    """
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


class ConfigManager:
    """Manages configuration loading for Markdown Tag Finder."""

    def __init__(self, configPath: Optional[str] = None, configDirs: Optional[List[str]] = None):
        """Initialize ConfigManager with optional config file path and config directories."""
        self.config_path = configPath
        self.config_dirs = configDirs or []
        self.config = substituteEnvVars(self._loadConfig())

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory."""
        tomlFiles: List[Path] = []
        dirPath = Path(directory)

        if not dirPath.exists():
            logger.warning(f"Config directory {directory} does not exist, skipping")
            return tomlFiles

        if not dirPath.is_dir():
            logger.warning(f"Config path {directory} is not a directory, skipping")
            return tomlFiles

        try:
            for tomlFile in dirPath.rglob("*.toml"):
                if tomlFile.is_file():
                    tomlFiles.append(tomlFile)
                    logger.debug(f"Found config file: {tomlFile}")
        except OSError as e:
            logger.error(f"Error scanning directory {directory}: {e}")

        return sorted(tomlFiles)

    def _mergeConfigs(self, baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries."""
        merged = baseConfig.copy()

        for key, value in newConfig.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._mergeConfigs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def _loadConfig(self) -> Dict[str, Any]:
        """
        Load configuration from TOML file and optional config directories.

        Files found in config directories are merged on top of the main
        config file in sorted path order, so later files win.

        Returns:
            Dict[str, Any]: The loaded and merged configuration dictionary.

        Raises:
            SystemExit: If the main configuration file was given but not found
                        and no config directories are provided, or if the main
                        configuration file can't be parsed.
        """
        config: Dict[str, Any] = {}

        if self.config_path is not None:
            configFile = Path(self.config_path)
            if not configFile.exists():
                if not self.config_dirs:
                    logger.error(f"Configuration file {self.config_path} not found!")
                    sys.exit(1)
                logger.warning(f"Configuration file {self.config_path} not found, using config dirs only")
            else:
                try:
                    with open(configFile, "rb") as f:
                        config = tomli.load(f)
                    logger.info(f"Loaded main config from {self.config_path}")
                except (OSError, tomli.TOMLDecodeError) as e:
                    logger.error(f"Failed to load configuration: {e}")
                    sys.exit(1)

        if self.config_dirs:
            logger.info(f"Scanning {len(self.config_dirs)} config directories for .toml files")

            for configDir in self.config_dirs:
                tomlFiles = self._findTomlFilesRecursive(configDir)
                logger.info(f"Found {len(tomlFiles)} .toml files in {configDir}")

                for tomlFile in tomlFiles:
                    try:
                        with open(tomlFile, "rb") as f:
                            dirConfig = tomli.load(f)
                    except (OSError, tomli.TOMLDecodeError) as e:
                        # Continue with other files instead of exiting
                        logger.error(f"Failed to load config file {tomlFile}: {e}")
                        continue

                    config = self._mergeConfigs(config, dirConfig)
                    logger.info(f"Merged config from {tomlFile}")

        logger.debug("Configuration loaded and merged successfully")
        return config

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})

    def getTaggerConfig(self) -> Dict[str, Any]:
        """
        Get tag finder CLI configuration.

        Returns:
            Dict with keys:
            - format: Output format, "json" or "text"
            - encoding: Encoding used to read input files
        """
        return {**DEFAULT_TAGGER_CONFIG, **self.get("tagger", {})}
