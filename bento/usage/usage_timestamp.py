import logging
from typing import Optional

import store
from config import BentoConfig

logger = logging.getLogger(__name__)


def record_usage_timestamp(cfg: BentoConfig, millis: Optional[int] = None) -> int:
    """Record that the kiji script was just used."""
    written = store.write_last_used(cfg.last_used_file, millis)
    logger.debug("Recorded last use %d in %s", written, cfg.last_used_file)
    return written
