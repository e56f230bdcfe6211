"""Base template options shared by every provider.

A :class:`TemplateOptions` instance describes how a batch of nodes should be
provisioned. It is built up through chained mutators, each of which
validates its arguments before touching any state, and is then handed
read-only to the provisioning workflow::

    options = TemplateOptions().inbound_ports(22, 80).block_on_port(22, 120)

Provider variants subclass it and extend :meth:`TemplateOptions.copy_to` so
that cloning and layering preserve their extra fields.
"""

import warnings
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, TypeVar, Union

from nimbus.errors import InvalidArgument, ReadOnlyOptions, TypeMismatch
from nimbus.options.payload import Payload


T = TypeVar("T", bound="TemplateOptions")
V = TypeVar("V", bound="TemplateOptions")

MAX_PORT = 65535
PEM_PREFIX = "-----BEGIN "


def check_port(port: Any, name: str = "port") -> int:
    """Validate a TCP/UDP port number."""
    if isinstance(port, bool) or not isinstance(port, int):
        raise InvalidArgument(f"{name} must be an integer, got {port!r}")
    if not 0 <= port <= MAX_PORT:
        raise InvalidArgument(f"{name} must be between 0 and {MAX_PORT}, got {port}")
    return port


def check_text(value: Any, name: str) -> str:
    """Validate a required, non-empty string."""
    if value is None:
        raise InvalidArgument(f"{name} was None")
    if not isinstance(value, str) or not value:
        raise InvalidArgument(f"{name} must be a non-empty string, got {value!r}")
    return value


def _key_text(key: Union[str, Payload, None], name: str, stacklevel: int = 3) -> str:
    if key is None:
        raise InvalidArgument(f"{name} was None")
    if isinstance(key, Payload):
        warnings.warn(
            f"passing {name} as a Payload is deprecated, pass a string instead",
            DeprecationWarning,
            stacklevel=stacklevel,
        )
        key = key.as_text()
    return check_text(key, name)


def _private_key_text(key: Union[str, Payload, None], name: str) -> str:
    key = _key_text(key, name, stacklevel=4)
    if not key.lstrip().startswith(PEM_PREFIX):
        raise InvalidArgument(f"{name} should be PEM encoded and start with {PEM_PREFIX!r}")
    return key


class TemplateOptions:
    """Options applied when creating a group of nodes.

    Instances are plain, single-owner value objects: build one per request,
    then treat it as read-only. Use :meth:`clone` to fork an independent
    copy. Mutators return ``self`` so calls can be chained.
    """

    NONE: "TemplateOptions"

    def __init__(self):
        self._inbound_ports: Tuple[int, ...] = ()
        self._port: Optional[int] = None
        self._seconds: Optional[int] = None
        self._script: Optional[Payload] = None
        self._private_key: Optional[str] = None
        self._public_key: Optional[str] = None
        self._login_user: Optional[str] = None
        self._login_private_key: Optional[str] = None
        self._user_metadata: Dict[str, str] = {}
        self._include_metadata = False
        self._frozen = False

    # copy protocol

    def clone(self: T) -> T:
        """Return an independent copy of the same concrete type."""
        options = type(self)()
        self.copy_to(options)
        return options

    def copy_to(self, to: "TemplateOptions") -> None:
        """Copy every base field onto ``to``.

        Variants override this, call ``super().copy_to(to)`` first and then
        apply their own fields only when ``to`` supports them.
        """
        to._check_mutable()
        to._inbound_ports = self._inbound_ports
        to._port = self._port
        to._seconds = self._seconds
        to._script = self._script
        to._private_key = self._private_key
        to._public_key = self._public_key
        to._login_user = self._login_user
        to._login_private_key = self._login_private_key
        to._user_metadata = dict(self._user_metadata)
        to._include_metadata = self._include_metadata

    def try_as(self, variant: Type[V]) -> Optional[V]:
        """Return this object viewed as ``variant``, or None if unsupported."""
        if isinstance(self, variant):
            return self
        return None

    def as_variant(self, variant: Type[V]) -> V:
        """Return this object viewed as ``variant``.

        Raises :class:`TypeMismatch` when the options are a different variant.
        """
        options = self.try_as(variant)
        if options is None:
            raise TypeMismatch(
                f"{type(self).__name__} does not support {variant.__name__} options"
            )
        return options

    # mutators

    def inbound_ports(self: T, *ports: int) -> T:
        """Replace the ports opened on provisioned nodes."""
        checked = tuple(dict.fromkeys(check_port(port) for port in ports))
        self._check_mutable()
        self._inbound_ports = checked
        return self

    def block_on_port(self: T, port: int, seconds: int) -> T:
        """Block provisioning until ``port`` answers or ``seconds`` elapse."""
        check_port(port)
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise InvalidArgument(f"seconds must be an integer, got {seconds!r}")
        if seconds < 0:
            raise InvalidArgument(f"seconds must be non-negative, got {seconds}")
        self._check_mutable()
        self._port = port
        self._seconds = seconds
        return self

    def run_script(self: T, script: Union[Payload, str, bytes]) -> T:
        """Run ``script`` on first boot of each node.

        Raw ``bytes`` are still accepted but deprecated.
        """
        if script is None:
            raise InvalidArgument("script was None")
        if isinstance(script, (bytes, bytearray)):
            warnings.warn(
                "passing a raw byte buffer to run_script is deprecated, pass a Payload or str",
                DeprecationWarning,
                stacklevel=2,
            )
            script = Payload(script)
        elif isinstance(script, str):
            script = Payload.from_string(script, content_type="text/x-shellscript")
        elif not isinstance(script, Payload):
            raise InvalidArgument(f"script must be a Payload, str or bytes, got {type(script).__name__}")
        if not len(script):
            raise InvalidArgument("script must not be empty")
        self._check_mutable()
        self._script = script
        return self

    def install_private_key(self: T, private_key: Union[str, Payload]) -> T:
        """Install a PEM private key for the login user on each node."""
        key = _private_key_text(private_key, "private_key")
        self._check_mutable()
        self._private_key = key
        return self

    def authorize_public_key(self: T, public_key: Union[str, Payload]) -> T:
        """Authorize a public key for the login user on each node."""
        key = _key_text(public_key, "public_key")
        self._check_mutable()
        self._public_key = key
        return self

    def override_login_user(self: T, user: str) -> T:
        """Log in as ``user`` instead of the image default."""
        user = check_text(user, "user")
        self._check_mutable()
        self._login_user = user
        return self

    def override_login_private_key(self: T, private_key: str) -> T:
        """Log in with ``private_key`` instead of generated credentials."""
        key = _private_key_text(private_key, "login_private_key")
        self._check_mutable()
        self._login_private_key = key
        return self

    def user_metadata(self: T, key_or_mapping: Union[str, Mapping[str, str]], value: Optional[str] = None) -> T:
        """Attach user metadata to each node.

        A mapping replaces all existing entries; a key and value adds one.
        """
        if isinstance(key_or_mapping, Mapping):
            if value is not None:
                raise InvalidArgument("value must not be given with a metadata mapping")
            entries = {
                check_text(k, "metadata key"): self._metadata_value(v)
                for k, v in key_or_mapping.items()
            }
            self._check_mutable()
            self._user_metadata = entries
            return self
        key = check_text(key_or_mapping, "metadata key")
        value = self._metadata_value(value)
        self._check_mutable()
        self._user_metadata[key] = value
        return self

    def with_metadata(self: T) -> T:
        """Fetch and attach extended metadata to the resulting nodes."""
        self._check_mutable()
        self._include_metadata = True
        return self

    # accessors

    def get_inbound_ports(self) -> Tuple[int, ...]:
        return self._inbound_ports

    def get_port(self) -> Optional[int]:
        return self._port

    def get_seconds(self) -> Optional[int]:
        return self._seconds

    def get_run_script(self) -> Optional[Payload]:
        return self._script

    def get_private_key(self) -> Optional[str]:
        return self._private_key

    def get_public_key(self) -> Optional[str]:
        return self._public_key

    def get_login_user(self) -> Optional[str]:
        return self._login_user

    def get_login_private_key(self) -> Optional[str]:
        return self._login_private_key

    def get_user_metadata(self) -> Dict[str, str]:
        return dict(self._user_metadata)

    def is_include_metadata(self) -> bool:
        return self._include_metadata

    def is_frozen(self) -> bool:
        return self._frozen

    # internals

    def to_dict(self) -> Dict[str, Any]:
        """Field values keyed by name, for display and comparison."""
        return {
            "inbound_ports": self._inbound_ports,
            "block_on_port": self._port,
            "block_seconds": self._seconds,
            "run_script": self._script,
            "private_key": self._private_key,
            "public_key": self._public_key,
            "login_user": self._login_user,
            "login_private_key": self._login_private_key,
            "user_metadata": dict(self._user_metadata),
            "include_metadata": self._include_metadata,
        }

    def _freeze(self: T) -> T:
        self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise ReadOnlyOptions(
                f"{type(self).__name__}.NONE is read-only, clone() it before customizing"
            )

    @staticmethod
    def _metadata_value(value: Any) -> str:
        if value is None:
            raise InvalidArgument("metadata value was None")
        if not isinstance(value, str):
            raise InvalidArgument(f"metadata value must be a string, got {value!r}")
        return value

    def __eq__(self, other):
        if not isinstance(other, TemplateOptions):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self):
        fields = ", ".join(
            f"{name}={value!r}" for name, value in self.to_dict().items()
            if value is not None and value is not False and value != () and value != {}
        )
        return f"{type(self).__name__}({fields})"


TemplateOptions.NONE = TemplateOptions()._freeze()


def shortcut(variant: Type[T], mutator: str) -> Callable[..., T]:
    """Build a factory that creates a ``variant`` and applies ``mutator``."""
    if not callable(getattr(variant, mutator, None)):
        raise AttributeError(f"{variant.__name__} has no mutator {mutator!r}")

    def factory(*args, **kwargs):
        return getattr(variant(), mutator)(*args, **kwargs)

    factory.__name__ = mutator
    factory.__qualname__ = mutator
    factory.__doc__ = f"Create a {variant.__name__} and apply {variant.__name__}.{mutator}."
    return factory


inbound_ports = shortcut(TemplateOptions, "inbound_ports")
block_on_port = shortcut(TemplateOptions, "block_on_port")
run_script = shortcut(TemplateOptions, "run_script")
install_private_key = shortcut(TemplateOptions, "install_private_key")
authorize_public_key = shortcut(TemplateOptions, "authorize_public_key")
user_metadata = shortcut(TemplateOptions, "user_metadata")
with_metadata = shortcut(TemplateOptions, "with_metadata")
