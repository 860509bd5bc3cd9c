from __future__ import annotations

import argparse
import logging
import os
from typing import List

from gyazo_client.cli.client_cmds import register_client_commands, run_client_command
from gyazo_client.config import GyazoClientOptions

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]
DEFAULT_LOG_LEVEL = "warning"


def _env_log_level() -> str:
    """Read GYAZO_LOG_LEVEL; unknown values fall back to the default."""

    raw = os.environ.get("GYAZO_LOG_LEVEL", "").strip().lower()
    return raw if raw in LOG_LEVELS else DEFAULT_LOG_LEVEL


def build_parser() -> argparse.ArgumentParser:
    """Build the `gyazo` argument parser.

    Global options default from the environment (GyazoClientOptions.from_env)
    so scripts can export GYAZO_ACCESS_TOKEN once.
    """

    env = GyazoClientOptions.from_env()

    p = argparse.ArgumentParser(prog="gyazo", description="Gyazo image hosting API client")
    p.add_argument(
        "--access-token",
        default=env.access_token or None,
        help="API access token (default: $GYAZO_ACCESS_TOKEN)",
    )
    p.add_argument("--base-url", default=env.base_url, help="API origin")
    p.add_argument("--upload-url", default=env.upload_url, help="Upload origin")
    p.add_argument(
        "--timeout",
        type=float,
        default=env.timeout,
        help="Socket timeout in seconds (default: transport default)",
    )
    p.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        default=_env_log_level(),
        help="Logging level (debug shows each request line)",
    )

    sub = p.add_subparsers(dest="cmd", required=True)
    register_client_commands(sub)

    return p


def main(argv: List[str] | None = None) -> int:
    """CLI entry."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    return run_client_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
