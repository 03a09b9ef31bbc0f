"""
Errors raised while building an upgrade check-in message.

Each kind also derives from the closest builtin so callers that only care
about "bad argument" vs "lookup" vs "I/O" can catch those instead.
"""


class BentoError(Exception):
    """Base class for check-in construction failures."""


class MissingFieldError(BentoError, ValueError):
    """A value the caller must supply was never given to the builder."""


class InvalidFieldError(BentoError, ValueError):
    """A supplied value can't be carried by the check-in wire format."""


class EnvironmentLookupError(BentoError, LookupError):
    """A required system property has no value."""

    def __init__(self, key: str):
        super().__init__(f"There was no value for system property: {key}")
        self.key = key


class MetadataUnavailableError(BentoError, OSError):
    """The installed BentoBox version could not be determined."""
