"""
ConfigLoader module for loading and validating TOML or YAML configuration files
"""

import tomllib
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Union


class ConfigurationError(Exception):
    """Raised when configuration is invalid or incomplete"""
    pass


@dataclass
class APIConfig:
    """Configuration data class for the HAL adapter"""
    name: str
    base_url: str
    particle: Optional[str] = None
    http: Dict[str, Any] = field(default_factory=dict)
    pagination: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)

    @property
    def timeout(self) -> float:
        return float(self.http.get('timeout', 30.0))

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.http.get('headers', {}))

    @property
    def max_turns(self) -> int:
        return int(self.pagination.get('max_turns', 50))

    @property
    def default_count(self) -> Union[int, str]:
        return self.pagination.get('default_count', 'max')


class ConfigLoader:
    """Loads and validates adapter configuration files"""

    # Required configuration sections and their mandatory keys
    REQUIRED_SECTIONS = {
        'api': ['name', 'base_url']
    }

    # Optional sections that default to empty values
    OPTIONAL_SECTIONS = [
        'http',
        'pagination',
        'logging'
    ]

    YAML_SUFFIXES = ('.yml', '.yaml')

    @staticmethod
    def load_config(config_path: Union[str, Path]) -> APIConfig:
        """
        Load adapter configuration from a TOML or YAML file

        Args:
            config_path: Path to the configuration file; .yml/.yaml files are
                read as YAML, anything else as TOML

        Returns:
            APIConfig object with all configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the file cannot be parsed or required
                configuration is missing
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix.lower() in ConfigLoader.YAML_SUFFIXES:
            config_data = ConfigLoader._load_yaml(config_path)
        else:
            config_data = ConfigLoader._load_toml(config_path)

        return ConfigLoader.build_config(config_data)

    @staticmethod
    def build_config(config_data: Dict[str, Any]) -> APIConfig:
        """
        Validate parsed configuration data and build an APIConfig

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        if not isinstance(config_data, dict):
            raise ConfigurationError("Configuration root must be a mapping")

        ConfigLoader._validate_required_sections(config_data)

        for section_name in ConfigLoader.OPTIONAL_SECTIONS:
            section = config_data.get(section_name, {})
            if not isinstance(section, dict):
                raise ConfigurationError(f"Section [{section_name}] must be a table")

        config = APIConfig(
            name=config_data['api']['name'],
            base_url=config_data['api']['base_url'],
            particle=config_data['api'].get('particle'),
            http=config_data.get('http', {}),
            pagination=config_data.get('pagination', {}),
            logging=config_data.get('logging', {})
        )

        ConfigLoader._validate_values(config)
        return config

    @staticmethod
    def _load_toml(config_path: Path) -> Dict[str, Any]:
        try:
            with open(config_path, 'rb') as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {config_path}: {e}")

    @staticmethod
    def _load_yaml(config_path: Path) -> Dict[str, Any]:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}")

    @staticmethod
    def _validate_required_sections(config_data: Dict[str, Any]) -> None:
        """
        Validate that all required configuration sections and keys are present

        Args:
            config_data: Parsed configuration data

        Raises:
            ConfigurationError: If any required section or key is missing
        """
        missing_items = []

        for section_name, required_keys in ConfigLoader.REQUIRED_SECTIONS.items():
            if section_name not in config_data:
                missing_items.append(f"Section [{section_name}]")
            else:
                section_data = config_data[section_name]
                for key in required_keys:
                    if key not in section_data:
                        missing_items.append(f"Key '{key}' in section [{section_name}]")

        if missing_items:
            raise ConfigurationError(
                f"Missing required configuration items: {', '.join(missing_items)}"
            )

    @staticmethod
    def _validate_values(config: APIConfig) -> None:
        if not str(config.base_url).startswith(('http://', 'https://')):
            raise ConfigurationError(f"base_url must be an http(s) URL: {config.base_url}")

        try:
            max_turns = config.max_turns
            timeout = config.timeout
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid numeric configuration value: {e}")

        if max_turns < 1:
            raise ConfigurationError(f"pagination.max_turns must be a positive integer, got {max_turns}")
        if timeout <= 0:
            raise ConfigurationError(f"http.timeout must be positive, got {timeout}")
