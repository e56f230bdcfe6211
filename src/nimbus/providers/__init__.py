"""Provider modules binding options variants and defaults."""

from nimbus.providers.base import ProviderModule, GenericModule
from nimbus.providers.registry import ProviderRegistry, get_provider_registry

__all__ = [
    "ProviderModule",
    "GenericModule",
    "ProviderRegistry",
    "get_provider_registry",
]
