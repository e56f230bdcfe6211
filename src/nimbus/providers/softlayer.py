"""SoftLayer provider module."""

import logging

from nimbus.options.base import TemplateOptions
from nimbus.options.softlayer import SoftLayerTemplateOptions
from nimbus.providers.base import ProviderModule


logger = logging.getLogger(__name__)


class SoftLayerModule(ProviderModule):
    """Applies the configured default domain to softlayer options."""

    name = "softlayer"
    options_class = SoftLayerTemplateOptions

    def provide_template_options(self, options: TemplateOptions) -> TemplateOptions:
        domain_name = self.config.softlayer.domain_name if self.config else None
        if domain_name:
            options.as_variant(SoftLayerTemplateOptions).domain_name(domain_name)
            logger.debug(f"Default softlayer domain: {domain_name}")
        return options
