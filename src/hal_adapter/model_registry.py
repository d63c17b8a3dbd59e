"""
ModelRegistry module holding one ResourceModel per API particle
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional

from hal_adapter.resource_model import ResourceModel


class ModelRegistry:
    """
    Explicit holder of long-lived resource models

    Models are created lazily through the factory and reused afterwards, so
    each particle keeps a single cache and pagination cursor.
    """

    def __init__(self, model_factory: Callable[[str], ResourceModel]):
        self.model_factory = model_factory
        self._models: Dict[str, ResourceModel] = {}
        self.logger = logging.getLogger(__name__)

    def get(self, particle: str) -> ResourceModel:
        """Return the model bound to particle, creating it on first use"""
        if particle not in self._models:
            self.logger.debug(f"Creating model for particle '{particle}'")
            self._models[particle] = self.model_factory(particle)
        return self._models[particle]

    def register(self, particle: str, model: ResourceModel) -> None:
        """Install a prebuilt model, replacing any existing one"""
        self._models[particle] = model

    def unregister(self, particle: str) -> Optional[ResourceModel]:
        return self._models.pop(particle, None)

    def __contains__(self, particle: Any) -> bool:
        return particle in self._models

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)
