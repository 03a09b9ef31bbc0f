from dotenv import load_dotenv
load_dotenv()

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import kiji_env
import store
from config import load_config
from upgrade import BentoError, CheckinMessageBuilder
from usage import generate_uuid, record_usage_timestamp

logger = logging.getLogger("kiji-bento")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ---------- Commands ----------

def _cmd_generate_uuid(args: argparse.Namespace) -> int:
    generate_uuid(load_config())
    return 0


def _cmd_record_usage(args: argparse.Namespace) -> int:
    record_usage_timestamp(load_config())
    return 0


def _cmd_checkin(args: argparse.Namespace) -> int:
    """Build a check-in from the state files and print its JSON."""
    cfg = load_config()
    installation_id = store.read_uuid(cfg.uuid_file)
    last_used = store.read_last_used(cfg.last_used_file)

    message = (
        CheckinMessageBuilder()
        .with_id(installation_id)
        .with_last_used_millis(last_used)
        .build()
    )
    print(message.serialize())
    return 0


def _cmd_env(args: argparse.Namespace) -> int:
    kiji_home = Path(args.kiji_home) if args.kiji_home else load_config().kiji_home
    env = kiji_env.compute_environment(kiji_home.resolve(), os.environ.get("PATH", ""))
    logger.info("Set KIJI_HOME=%s", env["KIJI_HOME"])
    print(kiji_env.render_exports(env))
    return 0


# ---------- Entry point ----------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kiji-bento", description="Kiji BentoBox tooling")
    parser.add_argument("--log-file", help="write log output to this file instead of stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser(
        "generate-uuid", help="write an anonymous installation id unless one exists"
    ).set_defaults(func=_cmd_generate_uuid)
    sub.add_parser(
        "record-usage", help="record the current time as the last kiji usage"
    ).set_defaults(func=_cmd_record_usage)
    sub.add_parser(
        "checkin", help="print the upgrade check-in message as JSON"
    ).set_defaults(func=_cmd_checkin)

    env_parser = sub.add_parser("env", help="print shell exports for this distribution")
    env_parser.add_argument("--kiji-home", help="distribution root (default: $KIJI_HOME or cwd)")
    env_parser.set_defaults(func=_cmd_env)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        # an unopenable --log-file raises OSError here
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.INFO,
            format=LOG_FORMAT,
            filename=args.log_file,
        )
        return args.func(args)
    except (BentoError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
