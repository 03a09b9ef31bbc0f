"""
Builder for upgrade check-in messages.

Callers supply the two values only they know (the anonymous installation id
and the last time the ``kiji`` script ran). Everything else comes from the
platform and from package metadata when ``build()`` is called:

    message = (
        CheckinMessageBuilder()
        .with_id(installation_id)
        .with_last_used_millis(last_used)
        .build()
    )

``build()`` never returns a partially populated message. It raises:
  - MissingFieldError          id or last-used timestamp not supplied
  - EnvironmentLookupError     an OS or runtime property has no value
  - MetadataUnavailableError   the BentoBox version can't be read
  - InvalidFieldError          a supplied value isn't a 64-bit integer timestamp
                               or a string id

A builder is meant for one caller building one message; it is not thread-safe.
"""

from typing import Callable, Optional

from pydantic import ValidationError

from models.checkin import CheckinMessage
from upgrade.errors import InvalidFieldError, MetadataUnavailableError, MissingFieldError
from upgrade.system_properties import SystemProperties
from upgrade.version_info import get_software_version


class CheckinMessageBuilder:
    def __init__(
        self,
        properties: Optional[SystemProperties] = None,
        version_source: Optional[Callable[[], str]] = None,
    ):
        self._properties = properties if properties is not None else SystemProperties()
        self._version_source = version_source or get_software_version
        self._id: Optional[str] = None
        self._last_used_millis: Optional[int] = None

    def with_id(self, installation_id: str) -> "CheckinMessageBuilder":
        self._id = installation_id
        return self

    def with_last_used_millis(self, last_used_millis: int) -> "CheckinMessageBuilder":
        self._last_used_millis = last_used_millis
        return self

    def build(self) -> CheckinMessage:
        if not self._id:
            raise MissingFieldError("User id not supplied to check-in message builder.")
        # 0 is a valid timestamp; only an unset value is missing
        if self._last_used_millis is None:
            raise MissingFieldError(
                "Last usage timestamp for kiji script not supplied to check-in message builder."
            )

        operating_system = self._properties.operating_system()
        bento_version = self._version_source()
        if not bento_version:
            raise MetadataUnavailableError("BentoBox version source returned no version.")
        java_version = self._properties.runtime_version()

        try:
            return CheckinMessage(
                operating_system=operating_system,
                bento_version=bento_version,
                java_version=java_version,
                last_used_millis=self._last_used_millis,
                id=self._id,
            )
        except ValidationError as exc:
            raise InvalidFieldError(f"Invalid check-in message content: {exc}") from exc
