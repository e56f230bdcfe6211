"""Provider registry for managing provider modules."""

import logging
from typing import Dict, Optional, Type

from nimbus.errors import UnknownProvider
from nimbus.models.config import NimbusConfig
from nimbus.options.base import TemplateOptions
from nimbus.providers.base import GenericModule, ProviderModule
from nimbus.providers.ec2 import AWSEC2Module, EC2Module
from nimbus.providers.softlayer import SoftLayerModule


logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registry for managing provider modules."""
    
    def __init__(self):
        """Initialize provider registry."""
        self._modules: Dict[str, ProviderModule] = {}
        self._module_classes: Dict[str, Type[ProviderModule]] = {
            GenericModule.name: GenericModule,
            SoftLayerModule.name: SoftLayerModule,
            EC2Module.name: EC2Module,
            AWSEC2Module.name: AWSEC2Module,
        }
        
    def initialize(self, config: Optional[NimbusConfig] = None):
        """Initialize all modules with two-pass injection."""
        config = config or NimbusConfig()

        # Phase 1: Instantiate all modules
        for name, module_class in self._module_classes.items():
            try:
                self._modules[name] = module_class()
            except Exception as e:
                logger.error(f"Failed to instantiate provider module {name}: {e}")
                raise

        # Phase 2: Initialize and inject registry
        for name, module in self._modules.items():
            try:
                module.initialize(config, self)
                logger.debug(f"Initialized provider module: {name}")
            except Exception as e:
                logger.error(f"Failed to initialize provider module {name}: {e}")
                raise

    def register(self, module_class: Type[ProviderModule]):
        """Add a provider module class; takes effect on the next initialize."""
        self._module_classes[module_class.name] = module_class
                
    def get_module(self, name: str) -> Optional[ProviderModule]:
        """Get a provider module by name."""
        return self._modules.get(name)
        
    def list_providers(self) -> list[str]:
        """List available provider names."""
        return list(self._modules.keys())

    def template_options(self, name: str) -> TemplateOptions:
        """Return fresh options with the defaults of provider ``name``."""
        module = self.get_module(name)
        if module is None:
            raise UnknownProvider(f"Unknown provider: {name}")
        return module.template_options()


_registry: Optional[ProviderRegistry] = None


def get_provider_registry(config: Optional[NimbusConfig] = None) -> ProviderRegistry:
    """Return the process-wide registry.

    The registry is created and initialized on first use. Passing ``config``
    on a later call re-initializes every module with it.
    """
    global _registry
    if _registry is None:
        _registry = ProviderRegistry()
        _registry.initialize(config)
    elif config is not None:
        _registry.initialize(config)
    return _registry
