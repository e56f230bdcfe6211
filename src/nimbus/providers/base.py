"""Base provider module interface."""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Type

from nimbus.models.config import NimbusConfig
from nimbus.options.base import TemplateOptions


logger = logging.getLogger(__name__)


class ProviderModule(ABC):
    """Binds a provider name to its options variant and default options."""

    name: ClassVar[str]
    options_class: ClassVar[Type[TemplateOptions]] = TemplateOptions
    template_defaults: ClassVar[Dict[str, Any]] = {}

    def __init__(self):
        """Initialize provider module."""
        self.config: Optional[NimbusConfig] = None

    def initialize(self, config: NimbusConfig, registry=None):
        """Initialize the module with configuration."""
        self.config = config

    def template_options(self) -> TemplateOptions:
        """Return a fresh options object carrying this provider's defaults."""
        options = self.options_class()
        return self.provide_template_options(options)

    @abstractmethod
    def provide_template_options(self, options: TemplateOptions) -> TemplateOptions:
        """Layer provider-only defaults onto ``options``."""
        pass


class GenericModule(ProviderModule):
    """Provider-neutral module using the base options."""

    name = "generic"

    def provide_template_options(self, options: TemplateOptions) -> TemplateOptions:
        return options
