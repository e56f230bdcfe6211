"""SoftLayer template options.

Usage::

    from nimbus.options.softlayer import domain_name

    options = domain_name("example.com").inbound_ports(22, 80, 443)
"""

from typing import Optional

from nimbus.errors import InvalidArgument, InvalidDomain
from nimbus.options.base import TemplateOptions, shortcut
from nimbus.utils.domains import has_public_suffix


DEFAULT_DOMAIN_NAME = "example.org"


class SoftLayerTemplateOptions(TemplateOptions):
    """Template options with the domain used when ordering virtual guests."""

    NONE: "SoftLayerTemplateOptions"

    def __init__(self):
        super().__init__()
        self._domain_name = DEFAULT_DOMAIN_NAME

    def copy_to(self, to: TemplateOptions) -> None:
        super().copy_to(to)
        target = to.try_as(SoftLayerTemplateOptions)
        if target is not None:
            target.domain_name(self._domain_name)

    def domain_name(self, domain_name: Optional[str]) -> "SoftLayerTemplateOptions":
        """Replace the default domain of ordered guests.

        The name must end in a public suffix, so ``example.com`` is accepted
        while ``localhost`` is not.
        """
        if domain_name is None:
            raise InvalidArgument("domain_name was None")
        if not isinstance(domain_name, str):
            raise InvalidArgument(f"domain_name must be a string, got {domain_name!r}")
        if not has_public_suffix(domain_name):
            raise InvalidDomain(f"domain_name {domain_name!r} has no public suffix")
        self._check_mutable()
        self._domain_name = domain_name
        return self

    def get_domain_name(self) -> str:
        return self._domain_name

    def to_dict(self):
        fields = super().to_dict()
        fields["domain_name"] = self._domain_name
        return fields


SoftLayerTemplateOptions.NONE = SoftLayerTemplateOptions()._freeze()

domain_name = shortcut(SoftLayerTemplateOptions, "domain_name")
inbound_ports = shortcut(SoftLayerTemplateOptions, "inbound_ports")
block_on_port = shortcut(SoftLayerTemplateOptions, "block_on_port")
run_script = shortcut(SoftLayerTemplateOptions, "run_script")
install_private_key = shortcut(SoftLayerTemplateOptions, "install_private_key")
authorize_public_key = shortcut(SoftLayerTemplateOptions, "authorize_public_key")
user_metadata = shortcut(SoftLayerTemplateOptions, "user_metadata")
with_metadata = shortcut(SoftLayerTemplateOptions, "with_metadata")
