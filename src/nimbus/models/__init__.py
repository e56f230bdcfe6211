"""Pydantic models for configuration and validation."""

from nimbus.models.config import NimbusConfig, AWSEC2Config, SoftLayerConfig
from nimbus.models.template import TemplateSpec, BlockOnPortSpec

__all__ = [
    "NimbusConfig",
    "AWSEC2Config",
    "SoftLayerConfig",
    "TemplateSpec",
    "BlockOnPortSpec",
]
