"""EC2 provider modules."""

import logging

from nimbus.options.aws_ec2 import AWSEC2TemplateOptions
from nimbus.options.base import TemplateOptions
from nimbus.options.ec2 import EC2TemplateOptions
from nimbus.providers.base import ProviderModule
from nimbus.utils.templates import render_template


logger = logging.getLogger(__name__)

# ssh only starts after package updates finish on Amazon Linux, which can
# outlast the login retries, so skip the upgrade on first boot by default
CLOUD_CONFIG_TEMPLATE = "#cloud-config\nrepo_upgrade: {{ repo_upgrade }}\n"


class EC2Module(ProviderModule):
    """Generic EC2-compatible clouds."""

    name = "ec2"
    options_class = EC2TemplateOptions

    def provide_template_options(self, options: TemplateOptions) -> TemplateOptions:
        return options


class AWSEC2Module(EC2Module):
    """Amazon EC2: Amazon Linux images and cloud-config user data."""

    name = "aws-ec2"
    options_class = AWSEC2TemplateOptions
    template_defaults = {"os_family": "amzn-linux", "os_64bit": True}

    def provide_template_options(self, options: TemplateOptions) -> TemplateOptions:
        options = super().provide_template_options(options)
        settings = self.config.aws_ec2 if self.config else None
        repo_upgrade = settings.repo_upgrade if settings else "none"

        aws_options = options.as_variant(AWSEC2TemplateOptions)
        aws_options.user_data(render_template(CLOUD_CONFIG_TEMPLATE, repo_upgrade=repo_upgrade))
        if settings and settings.enable_monitoring:
            aws_options.enable_monitoring()
        return options
