"""
Settings file parsing for the inRiver packager
"""
import configparser
import json
from typing import Any, Dict

import yaml

from inriver_packager.core.logging import LOG_LEVELS

DEFAULT_SETTINGS = {"log_level": "INFO", "log_file": None}


class ConfigParser:
    def __init__(self, config_path: str):
        self.config_path = config_path

    def parse(self) -> Dict[str, Any]:
        if self.config_path.endswith('.yaml') or self.config_path.endswith('.yml'):
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        elif self.config_path.endswith('.json'):
            with open(self.config_path, 'r') as f:
                return json.load(f)
        elif self.config_path.endswith('.ini'):
            parser = configparser.ConfigParser()
            parser.read(self.config_path)
            return {section: dict(parser.items(section)) for section in parser.sections()}
        return {}

    def settings(self) -> Dict[str, Any]:
        """
        Logging settings from the file, merged over DEFAULT_SETTINGS.
        Keys may sit at the top level or under a "logging" section.
        Raises:
            ValueError: When the file is malformed or names an unknown log level.
        """
        try:
            raw = self.parse()
        except (yaml.YAMLError, configparser.Error) as e:
            raise ValueError(f"{self.config_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"{self.config_path}: expected a mapping at the top level")
        section = raw.get('logging') if isinstance(raw.get('logging'), dict) else raw
        settings = dict(DEFAULT_SETTINGS)
        for key in DEFAULT_SETTINGS:
            if section.get(key) is not None:
                settings[key] = section[key]
        settings['log_level'] = str(settings['log_level']).upper()
        if settings['log_level'] not in LOG_LEVELS:
            raise ValueError(f"{self.config_path}: unknown log_level {settings['log_level']!r}")
        return settings
