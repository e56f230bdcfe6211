"""EC2 template options."""

from typing import Optional, Tuple, Union

from nimbus.errors import InvalidArgument
from nimbus.options.base import TemplateOptions, check_text, shortcut


MAX_USER_DATA_BYTES = 16 * 1024


class EC2TemplateOptions(TemplateOptions):
    """Template options for EC2-compatible clouds."""

    NONE: "EC2TemplateOptions"

    def __init__(self):
        super().__init__()
        self._security_groups: Tuple[str, ...] = ()
        self._key_pair: Optional[str] = None
        self._no_key_pair = False
        self._user_data: Optional[bytes] = None

    def copy_to(self, to: TemplateOptions) -> None:
        super().copy_to(to)
        target = to.try_as(EC2TemplateOptions)
        if target is None:
            return
        target._security_groups = self._security_groups
        target._key_pair = self._key_pair
        target._no_key_pair = self._no_key_pair
        target._user_data = self._user_data

    def security_groups(self, *group_names: str) -> "EC2TemplateOptions":
        """Place nodes in the named security groups in addition to their own."""
        if not group_names:
            raise InvalidArgument("you must specify at least one security group")
        groups = tuple(dict.fromkeys(check_text(name, "security group") for name in group_names))
        self._check_mutable()
        self._security_groups = groups
        return self

    def key_pair(self, key_pair: str) -> "EC2TemplateOptions":
        """Use an existing key pair instead of creating one."""
        key_pair = check_text(key_pair, "key_pair")
        if self._no_key_pair:
            raise InvalidArgument("you cannot specify both key_pair and no_key_pair")
        self._check_mutable()
        self._key_pair = key_pair
        return self

    def no_key_pair(self) -> "EC2TemplateOptions":
        """Do not create or attach a key pair."""
        if self._key_pair is not None:
            raise InvalidArgument("you cannot specify both key_pair and no_key_pair")
        self._check_mutable()
        self._no_key_pair = True
        return self

    def user_data(self, data: Union[bytes, str]) -> "EC2TemplateOptions":
        """Pass unencoded user data (for example cloud-init) to the instances."""
        if data is None:
            raise InvalidArgument("user_data was None")
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif not isinstance(data, (bytes, bytearray)):
            raise InvalidArgument(f"user_data must be bytes or str, got {type(data).__name__}")
        if len(data) > MAX_USER_DATA_BYTES:
            raise InvalidArgument(f"user_data cannot be larger than {MAX_USER_DATA_BYTES} bytes")
        self._check_mutable()
        self._user_data = bytes(data)
        return self

    def get_security_groups(self) -> Tuple[str, ...]:
        return self._security_groups

    def get_key_pair(self) -> Optional[str]:
        return self._key_pair

    def should_create_key_pair(self) -> bool:
        return not self._no_key_pair and self._key_pair is None

    def is_no_key_pair(self) -> bool:
        return self._no_key_pair

    def get_user_data(self) -> Optional[bytes]:
        return self._user_data

    def to_dict(self):
        fields = super().to_dict()
        fields.update(
            security_groups=self._security_groups,
            key_pair=self._key_pair,
            no_key_pair=self._no_key_pair,
            user_data=self._user_data,
        )
        return fields


EC2TemplateOptions.NONE = EC2TemplateOptions()._freeze()

security_groups = shortcut(EC2TemplateOptions, "security_groups")
key_pair = shortcut(EC2TemplateOptions, "key_pair")
no_key_pair = shortcut(EC2TemplateOptions, "no_key_pair")
user_data = shortcut(EC2TemplateOptions, "user_data")
inbound_ports = shortcut(EC2TemplateOptions, "inbound_ports")
block_on_port = shortcut(EC2TemplateOptions, "block_on_port")
run_script = shortcut(EC2TemplateOptions, "run_script")
install_private_key = shortcut(EC2TemplateOptions, "install_private_key")
authorize_public_key = shortcut(EC2TemplateOptions, "authorize_public_key")
user_metadata = shortcut(EC2TemplateOptions, "user_metadata")
with_metadata = shortcut(EC2TemplateOptions, "with_metadata")
