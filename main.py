"""
Foundry Agent Deployer – main entry point.

Run once per pipeline job to create or update one agent in Azure AI Foundry.

Usage
-----
# Create the agent on first run, update it afterwards
python main.py deploy --kind cart-manager

# Use a different env store file (the pipeline writes it from its secret)
python main.py deploy --kind loyalty --env-file src/.env

# Show which agents already have an id recorded
python main.py status
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv(override=True)

from config.settings import settings  # noqa: E402 – must be after load_dotenv
from clients.foundry_client import AgentPlatform, FoundryAgentPlatform  # noqa: E402
from infra.catalog import load_agent_config  # noqa: E402
from infra.errors import DeploymentError  # noqa: E402
from infra.reconciler import reconcile  # noqa: E402
from models.agent import AgentKind  # noqa: E402
from storage.environment_store import EnvironmentStore  # noqa: E402


def _configure_logging() -> None:
    logger.remove()
    # stdout so the pipeline log captures it; no ANSI codes in non-TTY output.
    logger.add(
        sys.stdout,
        level=settings.log_level,
        colorize=False,
        format="{time:HH:mm:ss} | {level: <8} | {message}",
    )
    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(settings.log_file, level=settings.log_level, rotation="10 MB", retention="7 days")


def _kind(raw: str) -> AgentKind:
    try:
        return AgentKind.parse(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def run_deploy(kind: AgentKind, env_file: str, platform: Optional[AgentPlatform] = None) -> str:
    """Load the env store, reconcile one agent and persist the store if it changed."""
    env = EnvironmentStore.from_file(env_file)
    config = load_agent_config(kind, env)
    handle = reconcile(config, env, platform or FoundryAgentPlatform())
    if env.dirty:
        env.save(env_file)
    return handle


def run_status(env_file: str) -> None:
    env = EnvironmentStore.from_file(env_file)
    for kind in AgentKind:
        value = (env.get(kind.env_key) or "").strip()
        print(f"{kind.value:<16} {value or '-'}")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--env-file",
        default=settings.env_store_path,
        help="KEY=VALUE file holding MODEL_DEPLOYMENT_NAME and recorded agent ids.",
    )

    parser = argparse.ArgumentParser(description="Create or update agents in Azure AI Foundry")
    sub = parser.add_subparsers(dest="command", required=True)

    deploy = sub.add_parser("deploy", parents=[common], help="Create or update one agent.")
    deploy.add_argument(
        "--kind",
        type=_kind,
        required=True,
        help=f"Agent to deploy: {', '.join(k.value for k in AgentKind)}",
    )
    sub.add_parser("status", parents=[common], help="List recorded agent ids.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    _configure_logging()
    args = build_parser().parse_args(argv)

    try:
        if args.command == "deploy":
            handle = run_deploy(args.kind, args.env_file)
            print(f"AGENT_ID={handle}")
        else:
            run_status(args.env_file)
    except DeploymentError as exc:
        logger.error(f"{type(exc).__name__}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
