"""
Shell environment for a kiji-bento distribution.

Computes what ``kiji-env.sh`` used to set up and renders it as export lines,
so a shell can configure itself with:

    eval "$(kiji-bento env)"

Variables:
  KIJI_HOME            root of the kiji-bento distribution
  BENTO_CLUSTER_HOME   $KIJI_HOME/cluster
  HADOOP_HOME          first hadoop-* dir under $BENTO_CLUSTER_HOME/lib
  HBASE_HOME           first hbase-* dir under $BENTO_CLUSTER_HOME/lib
  PATH                 the distribution's bin dirs, then the existing PATH
"""

import logging
import os
import shlex
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


def _find_distribution(lib_dir: Path, pattern: str) -> Optional[Path]:
    if not lib_dir.is_dir():
        return None
    matches = sorted(p for p in lib_dir.glob(pattern) if p.is_dir())
    return matches[0] if matches else None


def compute_environment(kiji_home: Path, path: str = "") -> dict[str, str]:
    cluster_home = kiji_home / "cluster"
    env = {
        "KIJI_HOME": str(kiji_home),
        "BENTO_CLUSTER_HOME": str(cluster_home),
    }
    bin_dirs = [kiji_home / "bin", kiji_home / "schema-shell" / "bin", cluster_home / "bin"]

    for name, pattern in (("HADOOP_HOME", "hadoop-*"), ("HBASE_HOME", "hbase-*")):
        home = _find_distribution(cluster_home / "lib", pattern)
        if home is None:
            logger.warning("No %s distribution found under %s", pattern, cluster_home / "lib")
            continue
        env[name] = str(home)
        bin_dirs.append(home / "bin")

    entries = [str(d) for d in bin_dirs]
    if path:
        entries.append(path)
    env["PATH"] = os.pathsep.join(entries)
    return env


def render_exports(env: Mapping[str, str]) -> str:
    return "\n".join(f"export {name}={shlex.quote(value)}" for name, value in env.items())
