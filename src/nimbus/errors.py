"""Exception hierarchy for nimbus."""


class NimbusError(Exception):
    """Base class for all nimbus errors."""


class InvalidArgument(NimbusError, ValueError):
    """A required parameter was missing or malformed."""


class InvalidDomain(InvalidArgument):
    """A domain name is malformed or has no public suffix."""


class TypeMismatch(NimbusError, TypeError):
    """Options object is not the requested provider variant."""


class ReadOnlyOptions(NimbusError):
    """Attempt to mutate a frozen options sentinel."""


class UnknownProvider(NimbusError, KeyError):
    """No provider module registered under the requested name."""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class TemplateNotFound(NimbusError, KeyError):
    """Template name is not defined or cannot be resolved."""

    def __str__(self):
        return str(self.args[0]) if self.args else ""
