from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CHECKIN_TYPE = "checkversion"
CHECKIN_FORMAT = "bento-checkin-1.0.0"

# last_used travels as a signed 64-bit integer
MIN_MILLIS = -2**63
MAX_MILLIS = 2**63 - 1


class CheckinMessage(BaseModel):
    """
    A check-in sent to the BentoBox upgrade server.

    Carries the BentoBox version in use, the client's platform, an anonymous
    installation id and the last time the ``kiji`` script was run. The server
    dispatches on ``request_format``, so ``type`` and ``format`` are pinned to
    the values this release speaks and cannot be set to anything else.

    Instances are frozen: equality and hashing cover all seven fields.
    Use ``upgrade.builder.CheckinMessageBuilder`` to create one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    # Declaration order is the wire order.
    type: Literal["checkversion"] = CHECKIN_TYPE
    format: Literal["bento-checkin-1.0.0"] = Field(default=CHECKIN_FORMAT, alias="request_format")
    operating_system: str = Field(alias="os", min_length=1)       # "<name> <version> <arch>"
    bento_version: str = Field(min_length=1)
    java_version: str = Field(min_length=1)                       # runtime version
    last_used_millis: int = Field(                                # Unix time in milliseconds
        alias="last_used", strict=True, ge=MIN_MILLIS, le=MAX_MILLIS,
    )
    id: str = Field(min_length=1)                                 # anonymous installation id

    def serialize(self) -> str:
        """Compact JSON using the upgrade server's field names."""
        return self.model_dump_json(by_alias=True)
