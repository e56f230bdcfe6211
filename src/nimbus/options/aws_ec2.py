"""AWS EC2 template options.

Adds the AWS-only settings (monitoring, VPC security group ids, spot
pricing, subnet placement) on top of :class:`EC2TemplateOptions`.
"""

from typing import Optional, Tuple

from nimbus.errors import InvalidArgument
from nimbus.options.base import TemplateOptions, check_text, shortcut
from nimbus.options.ec2 import EC2TemplateOptions


class AWSEC2TemplateOptions(EC2TemplateOptions):
    """Template options for Amazon EC2."""

    NONE: "AWSEC2TemplateOptions"

    def __init__(self):
        super().__init__()
        self._monitoring_enabled = False
        self._security_group_ids: Tuple[str, ...] = ()
        self._spot_price: Optional[float] = None
        self._subnet_id: Optional[str] = None

    def copy_to(self, to: TemplateOptions) -> None:
        super().copy_to(to)
        target = to.try_as(AWSEC2TemplateOptions)
        if target is None:
            return
        target._monitoring_enabled = self._monitoring_enabled
        target._security_group_ids = self._security_group_ids
        target._spot_price = self._spot_price
        target._subnet_id = self._subnet_id

    def enable_monitoring(self) -> "AWSEC2TemplateOptions":
        """Enable detailed CloudWatch monitoring."""
        self._check_mutable()
        self._monitoring_enabled = True
        return self

    def security_group_ids(self, *group_ids: str) -> "AWSEC2TemplateOptions":
        """Attach existing security groups by id."""
        if not group_ids:
            raise InvalidArgument("you must specify at least one security group id")
        ids = tuple(dict.fromkeys(check_text(group_id, "security group id") for group_id in group_ids))
        self._check_mutable()
        self._security_group_ids = ids
        return self

    def spot_price(self, price: float) -> "AWSEC2TemplateOptions":
        """Request spot instances bid at ``price`` per hour."""
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise InvalidArgument(f"spot_price must be a number, got {price!r}")
        if price <= 0:
            raise InvalidArgument(f"spot_price must be positive, got {price}")
        self._check_mutable()
        self._spot_price = float(price)
        return self

    def subnet_id(self, subnet_id: str) -> "AWSEC2TemplateOptions":
        """Launch into the given VPC subnet."""
        subnet_id = check_text(subnet_id, "subnet_id")
        self._check_mutable()
        self._subnet_id = subnet_id
        return self

    def is_monitoring_enabled(self) -> bool:
        return self._monitoring_enabled

    def get_security_group_ids(self) -> Tuple[str, ...]:
        return self._security_group_ids

    def get_spot_price(self) -> Optional[float]:
        return self._spot_price

    def get_subnet_id(self) -> Optional[str]:
        return self._subnet_id

    def to_dict(self):
        fields = super().to_dict()
        fields.update(
            monitoring_enabled=self._monitoring_enabled,
            security_group_ids=self._security_group_ids,
            spot_price=self._spot_price,
            subnet_id=self._subnet_id,
        )
        return fields


AWSEC2TemplateOptions.NONE = AWSEC2TemplateOptions()._freeze()

enable_monitoring = shortcut(AWSEC2TemplateOptions, "enable_monitoring")
security_group_ids = shortcut(AWSEC2TemplateOptions, "security_group_ids")
spot_price = shortcut(AWSEC2TemplateOptions, "spot_price")
subnet_id = shortcut(AWSEC2TemplateOptions, "subnet_id")
security_groups = shortcut(AWSEC2TemplateOptions, "security_groups")
key_pair = shortcut(AWSEC2TemplateOptions, "key_pair")
no_key_pair = shortcut(AWSEC2TemplateOptions, "no_key_pair")
user_data = shortcut(AWSEC2TemplateOptions, "user_data")
inbound_ports = shortcut(AWSEC2TemplateOptions, "inbound_ports")
block_on_port = shortcut(AWSEC2TemplateOptions, "block_on_port")
run_script = shortcut(AWSEC2TemplateOptions, "run_script")
install_private_key = shortcut(AWSEC2TemplateOptions, "install_private_key")
authorize_public_key = shortcut(AWSEC2TemplateOptions, "authorize_public_key")
user_metadata = shortcut(AWSEC2TemplateOptions, "user_metadata")
with_metadata = shortcut(AWSEC2TemplateOptions, "with_metadata")
