"""
AdapterContext module wiring configuration, transport, logging and models
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from hal_adapter.config_loader import APIConfig, ConfigLoader, ConfigurationError
from hal_adapter.http_client import HTTPClient
from hal_adapter.logging_setup import DEFAULT_LOG_FORMAT, configure_logging, log_message
from hal_adapter.model_registry import ModelRegistry
from hal_adapter.resource_model import ResourceModel


class AdapterContext:
    """
    Explicitly constructed context shared by the models of one API

    Holds the transport, the default API particle, the logging sink and the
    model registry. Build one per API and pass it where models are needed.
    """

    def __init__(self, config: APIConfig, transport: Optional[Any] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config
        self.transport = transport or HTTPClient(
            config.base_url,
            timeout=config.timeout,
            headers=config.headers
        )
        self.api_particle = config.particle
        self.logger = logger or logging.getLogger(f"hal_adapter.{config.name}")
        self.registry = ModelRegistry(self._create_model)

    @classmethod
    def from_config_file(cls, config_path: Union[str, Path],
                         setup_logging: bool = True) -> 'AdapterContext':
        """
        Build a context from a TOML or YAML configuration file

        Args:
            config_path: Path to the configuration file
            setup_logging: Apply the [logging] section to root logging

        Returns:
            AdapterContext with an HTTPClient transport
        """
        config = ConfigLoader.load_config(config_path)
        if setup_logging and config.logging:
            configure_logging(
                level=config.logging.get('level'),
                log_format=config.logging.get('format', DEFAULT_LOG_FORMAT),
                log_file=config.logging.get('file')
            )
        return cls(config)

    def get_api_particle(self) -> Optional[str]:
        return self.api_particle

    def set_api_particle(self, particle: str) -> None:
        self.api_particle = particle

    def get_model(self, particle: Optional[str] = None) -> ResourceModel:
        """
        Model bound to particle, or to the context's default particle

        Raises:
            ConfigurationError: If no particle is given and none is configured
        """
        particle = particle or self.api_particle
        if not particle:
            raise ConfigurationError("No API particle given and no default particle configured")
        return self.registry.get(particle)

    def log(self, message: str, level: Union[int, str] = 'info', **context: Any) -> None:
        log_message(self.logger, message, level, context)

    def close(self) -> None:
        if hasattr(self.transport, 'close_connection'):
            self.transport.close_connection()

    def _create_model(self, particle: str) -> ResourceModel:
        return ResourceModel(
            self.transport,
            particle,
            max_turns=self.config.max_turns,
            default_count=self.config.default_count,
            logger=self.logger
        )
