"""
BentoBox tooling configuration.

Everything is read from the process environment; the CLI loads a ``.env``
file first, so any of these can live there:

  KIJI_HOME              root of the kiji-bento distribution (default: cwd)
  KIJI_BENTO_STATE_DIR   directory holding the id and last-used files
                         (default: ~/.kiji)
  KIJI_BENTO_VERSION     overrides the version read from package metadata
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

DIST_NAME = "kiji-bento"

KIJI_HOME_ENV_VAR = "KIJI_HOME"
STATE_DIR_ENV_VAR = "KIJI_BENTO_STATE_DIR"
VERSION_ENV_VAR = "KIJI_BENTO_VERSION"

UUID_FILE_NAME = ".kiji-bento-uuid"
LAST_USED_FILE_NAME = ".kiji-last-used"


class BentoConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    kiji_home: Path
    state_dir: Path

    @property
    def uuid_file(self) -> Path:
        return self.state_dir / UUID_FILE_NAME

    @property
    def last_used_file(self) -> Path:
        return self.state_dir / LAST_USED_FILE_NAME


def load_config(environ: Optional[Mapping[str, str]] = None) -> BentoConfig:
    env = os.environ if environ is None else environ

    kiji_home = env.get(KIJI_HOME_ENV_VAR) or os.getcwd()
    state_dir = env.get(STATE_DIR_ENV_VAR)
    if state_dir:
        state_path = Path(state_dir).expanduser()
    else:
        state_path = Path.home() / ".kiji"

    return BentoConfig(kiji_home=Path(kiji_home).expanduser(), state_dir=state_path)
