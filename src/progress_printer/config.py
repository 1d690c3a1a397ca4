"""Configuration file parsing and validation."""
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from progress_printer.printer import DEFAULT_EVERY

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when config file is invalid."""
    pass


class Config:
    """Parsed and validated printer defaults."""

    def __init__(self, data: Dict[str, Any]):
        self.raw = data
        self.every = data.get('every', DEFAULT_EVERY)
        self.name: Optional[str] = data.get('name')
        self.silent = data.get('silent', False)

        self._validate()

    def _validate(self) -> None:
        """Validate configuration values."""
        # bool is an int subclass, reject it explicitly
        if isinstance(self.every, bool) or not isinstance(self.every, int):
            raise ConfigError("every must be an integer")

        if self.every < 1:
            raise ConfigError(f"every must be positive, got {self.every}")

        if self.name is not None and not isinstance(self.name, str):
            raise ConfigError("name must be a string")

        if not isinstance(self.silent, bool):
            raise ConfigError("silent must be true or false")

    def printer_options(self) -> Dict[str, Any]:
        """Keyword arguments for PrinterFactory.create()."""
        options = {'every': self.every, 'silent': self.silent}
        if self.name is not None:
            options['name'] = self.name
        return options

    @classmethod
    def from_file(cls, path: Path) -> 'Config':
        """Load and parse config from YAML file."""
        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}")
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}")

        # An empty file means all defaults
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a YAML dictionary")

        logger.debug(f"Loaded config from {path}: {sorted(data)}")
        return cls(data)
