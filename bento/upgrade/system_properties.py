"""
Fixed-key view of the platform the tooling is running on.

The upgrade server's check-in format was defined against JVM system
properties, so lookups keep those key names. By default values are read
from the live platform on every lookup; pass a mapping to pin them.
"""

import platform
from typing import Mapping, Optional

from upgrade.errors import EnvironmentLookupError

OS_NAME = "os.name"
OS_VERSION = "os.version"
OS_ARCH = "os.arch"
JAVA_VERSION = "java.version"


def platform_properties() -> dict[str, str]:
    """Snapshot of the current platform under the fixed property keys."""
    return {
        OS_NAME: platform.system(),
        OS_VERSION: platform.release(),
        OS_ARCH: platform.machine(),
        JAVA_VERSION: platform.python_version(),
    }


class SystemProperties:
    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = values

    def get(self, key: str) -> str:
        """Value for ``key``. Missing and empty values both raise EnvironmentLookupError."""
        values = self._values if self._values is not None else platform_properties()
        value = values.get(key)
        if not value:
            raise EnvironmentLookupError(key)
        return value

    def operating_system(self) -> str:
        """OS name, version and architecture as one string."""
        os_name = self.get(OS_NAME)
        os_version = self.get(OS_VERSION)
        os_arch = self.get(OS_ARCH)
        return f"{os_name} {os_version} {os_arch}"

    def runtime_version(self) -> str:
        return self.get(JAVA_VERSION)
