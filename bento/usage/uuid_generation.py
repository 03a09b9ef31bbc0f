import logging

import store
from config import BentoConfig

logger = logging.getLogger(__name__)


def generate_uuid(cfg: BentoConfig) -> str:
    """Give this installation an anonymous id unless it already has one."""
    installation_id, created = store.write_uuid_if_absent(cfg.uuid_file)
    if created:
        logger.info("Wrote new installation id to %s", cfg.uuid_file)
    else:
        logger.debug("Installation id already present in %s", cfg.uuid_file)
    return installation_id
