"""Template specification models.

A :class:`TemplateSpec` is the YAML form of a set of template options. It is
validated by pydantic and then applied, mutator by mutator, to the options
object handed out by the provider registry.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, conint

from nimbus.options.aws_ec2 import AWSEC2TemplateOptions
from nimbus.options.base import TemplateOptions
from nimbus.options.ec2 import EC2TemplateOptions
from nimbus.options.payload import Payload
from nimbus.options.softlayer import SoftLayerTemplateOptions


logger = logging.getLogger(__name__)

Port = conint(ge=0, le=65535)


class BlockOnPortSpec(BaseModel):
    """Port to wait for after boot."""
    model_config = ConfigDict(extra="forbid")

    port: Port = Field(..., description="Port that must become reachable")
    seconds: conint(ge=0) = Field(..., description="Seconds to wait for the port")


class TemplateSpec(BaseModel):
    """Named template options as written in templates/*.yaml."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Template name")
    provider: Optional[str] = Field(None, description="Provider module name")
    extends: Optional[str] = Field(None, description="Template to inherit from")

    inbound_ports: List[Port] = Field(default_factory=list)
    block_on_port: Optional[BlockOnPortSpec] = None
    run_script: Optional[str] = Field(None, description="Jinja2 script template")
    variables: Dict[str, Any] = Field(default_factory=dict)
    private_key: Optional[str] = None
    public_key: Optional[str] = None
    login_user: Optional[str] = None
    login_private_key: Optional[str] = None
    user_metadata: Dict[str, str] = Field(default_factory=dict)
    include_metadata: bool = Field(default=False)

    # softlayer
    domain_name: Optional[str] = None

    # ec2
    security_groups: List[str] = Field(default_factory=list)
    key_pair: Optional[str] = None
    no_key_pair: bool = Field(default=False)
    user_data: Optional[str] = None

    # aws-ec2
    enable_monitoring: bool = Field(default=False)
    security_group_ids: List[str] = Field(default_factory=list)
    spot_price: Optional[PositiveFloat] = None
    subnet_id: Optional[str] = None

    def apply_to(self, options: TemplateOptions) -> TemplateOptions:
        """Apply every field set in this spec onto ``options``.

        Provider-only fields go through :meth:`TemplateOptions.as_variant`,
        so using them with a provider that lacks them raises TypeMismatch.
        """
        if self.inbound_ports:
            options.inbound_ports(*self.inbound_ports)
        if self.block_on_port is not None:
            options.block_on_port(self.block_on_port.port, self.block_on_port.seconds)
        if self.run_script is not None:
            options.run_script(Payload.from_template(self.run_script, **self.variables))
        if self.private_key is not None:
            options.install_private_key(self.private_key)
        if self.public_key is not None:
            options.authorize_public_key(self.public_key)
        if self.login_user is not None:
            options.override_login_user(self.login_user)
        if self.login_private_key is not None:
            options.override_login_private_key(self.login_private_key)
        for key, value in self.user_metadata.items():
            options.user_metadata(key, value)
        if self.include_metadata:
            options.with_metadata()

        if self.domain_name is not None:
            options.as_variant(SoftLayerTemplateOptions).domain_name(self.domain_name)

        if self.security_groups:
            options.as_variant(EC2TemplateOptions).security_groups(*self.security_groups)
        if self.key_pair is not None:
            options.as_variant(EC2TemplateOptions).key_pair(self.key_pair)
        if self.no_key_pair:
            options.as_variant(EC2TemplateOptions).no_key_pair()
        if self.user_data is not None:
            options.as_variant(EC2TemplateOptions).user_data(self.user_data)

        if self.enable_monitoring:
            options.as_variant(AWSEC2TemplateOptions).enable_monitoring()
        if self.security_group_ids:
            options.as_variant(AWSEC2TemplateOptions).security_group_ids(*self.security_group_ids)
        if self.spot_price is not None:
            options.as_variant(AWSEC2TemplateOptions).spot_price(self.spot_price)
        if self.subnet_id is not None:
            options.as_variant(AWSEC2TemplateOptions).subnet_id(self.subnet_id)

        logger.debug(f"Applied template {self.name} to {type(options).__name__}")
        return options
