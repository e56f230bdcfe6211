"""
Nimbus - compute template options.

Provider-agnostic options describing how a batch of compute nodes should be
provisioned, with provider variants, validation and copy semantics.
"""

__version__ = "1.0.0"
__author__ = "Nimbus Development Team"

# Re-export key components for easier access
from nimbus.options import (
    TemplateOptions,
    Payload,
    SoftLayerTemplateOptions,
    EC2TemplateOptions,
    AWSEC2TemplateOptions,
)
from nimbus.providers import ProviderRegistry, get_provider_registry

__all__ = [
    "TemplateOptions",
    "Payload",
    "SoftLayerTemplateOptions",
    "EC2TemplateOptions",
    "AWSEC2TemplateOptions",
    "ProviderRegistry",
    "get_provider_registry",
]
