"""Template options and their provider variants."""

from nimbus.options.base import TemplateOptions
from nimbus.options.payload import Payload
from nimbus.options.softlayer import SoftLayerTemplateOptions
from nimbus.options.ec2 import EC2TemplateOptions
from nimbus.options.aws_ec2 import AWSEC2TemplateOptions

__all__ = [
    "TemplateOptions",
    "Payload",
    "SoftLayerTemplateOptions",
    "EC2TemplateOptions",
    "AWSEC2TemplateOptions",
]
