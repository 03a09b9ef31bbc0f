import logging
import os
from importlib import metadata

import config
from upgrade.errors import MetadataUnavailableError

logger = logging.getLogger(__name__)


def get_software_version() -> str:
    """
    Version of BentoBox in use.

    KIJI_BENTO_VERSION wins when set; otherwise the version comes from the
    installed distribution's metadata.
    """
    override = os.environ.get(config.VERSION_ENV_VAR)
    if override:
        return override

    try:
        version = metadata.version(config.DIST_NAME)
    except metadata.PackageNotFoundError as exc:
        raise MetadataUnavailableError(
            f"Unable to read the version of {config.DIST_NAME!r} from package metadata"
        ) from exc

    if not version:
        raise MetadataUnavailableError(f"Package metadata for {config.DIST_NAME!r} has no version")
    logger.debug("Read BentoBox version %s from package metadata", version)
    return version
