from upgrade.builder import CheckinMessageBuilder
from upgrade.errors import (
    BentoError,
    EnvironmentLookupError,
    InvalidFieldError,
    MetadataUnavailableError,
    MissingFieldError,
)
from upgrade.system_properties import SystemProperties

__all__ = [
    "CheckinMessageBuilder",
    "SystemProperties",
    "BentoError",
    "EnvironmentLookupError",
    "InvalidFieldError",
    "MetadataUnavailableError",
    "MissingFieldError",
]
