"""
Signing settings.

Settings come from an optional signing.yaml in the Android project root, with
SIGNING_* environment variables taking precedence over the file.
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .exceptions import SettingsException
from .signing import DEFAULT_KEY_FILE, ReleasePolicy, parse_release_policy

logger = logging.getLogger(__name__)

SETTINGS_FILE = 'signing.yaml'

STRING_FIELDS = ('properties_file', 'toolchain_file', 'namespace', 'application_id', 'java_version')

ENV_OVERRIDES = {
    'SIGNING_PROPERTIES_FILE': 'properties_file',
    'SIGNING_RELEASE_POLICY': 'release_policy',
}


@dataclass
class Settings:
    """Build-time settings for the Android app module."""

    properties_file: str = DEFAULT_KEY_FILE
    toolchain_file: str = 'local.properties'
    release_policy: ReleasePolicy = ReleasePolicy.FAIL
    namespace: str = 'com.example.minddrop'
    application_id: str = 'com.example.minddrop'
    java_version: str = '11'

    @classmethod
    def load(cls, root_dir: Union[str, Path]) -> 'Settings':
        """Load settings for the project at root_dir."""
        values = cls._load_file(Path(root_dir) / SETTINGS_FILE)

        for env_var, field_name in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value and value.strip():
                logger.debug(f"{field_name} overridden by {env_var}")
                values[field_name] = value.strip()

        unknown = set(values) - set(cls.__dataclass_fields__)
        if unknown:
            raise SettingsException(f"Unknown settings in {SETTINGS_FILE}: {sorted(unknown)}")

        values['release_policy'] = parse_release_policy(
            values.get('release_policy', ReleasePolicy.FAIL.value)
        )

        # YAML reads `java_version: 11` as an int
        java_version = values.get('java_version')
        if isinstance(java_version, (int, float)) and not isinstance(java_version, bool):
            values['java_version'] = str(values['java_version'])

        for field_name in STRING_FIELDS:
            if field_name in values and not isinstance(values[field_name], str):
                raise SettingsException(
                    f"Setting '{field_name}' in {SETTINGS_FILE} must be a string, "
                    f"got {values[field_name]!r}"
                )
            if field_name in values and not values[field_name].strip():
                raise SettingsException(f"Setting '{field_name}' in {SETTINGS_FILE} must not be empty")

        return cls(**values)

    @staticmethod
    def _load_file(config_path: Path) -> Dict[str, Any]:
        if not config_path.exists():
            logger.debug(f"No {SETTINGS_FILE} at {config_path} (using defaults)")
            return {}

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsException(f"Failed to parse {config_path}: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise SettingsException(f"{config_path} must contain a mapping of settings")
        logger.info(f"Loaded signing settings from {config_path}")
        return dict(config)
