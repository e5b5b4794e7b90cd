"""
reconciler.py – Decides whether a deploy creates a new agent or updates one.

The env store records one agent id per AgentKind.  A recorded id is always
updated in place; only an absent or empty entry leads to a create.  A stale id
surfaces as RemoteUpdateError instead of silently creating a second agent.
"""

from __future__ import annotations

from typing import MutableMapping, Optional

from loguru import logger

from clients.foundry_client import AgentPlatform
from infra.errors import RemoteCreateError
from models.agent import AgentConfig, RemoteAgentHandle


def recorded_handle(config: AgentConfig, env: MutableMapping[str, str]) -> Optional[RemoteAgentHandle]:
    raw = (env.get(config.kind.env_key) or "").strip()
    return RemoteAgentHandle(raw) if raw else None


def reconcile(
    config: AgentConfig,
    env: MutableMapping[str, str],
    platform: AgentPlatform,
) -> RemoteAgentHandle:
    """
    Bring the remote agent for ``config.kind`` in line with ``config``.

    Update path: the recorded handle is passed to ``platform.update`` and
    returned; ``env`` is not touched.

    Create path: ``platform.create`` is called once and the new handle is
    written to ``env[config.kind.value]``.  Persisting ``env`` is the caller's
    job.

    Errors from the platform propagate unchanged and leave ``env`` as it was.
    """
    handle = recorded_handle(config, env)

    if handle is not None:
        logger.info(f"{config.kind.value}: existing agent {handle}, updating")
        platform.update(handle, config)
        return handle

    logger.info(f"{config.kind.value}: no agent recorded, creating")
    new_handle = platform.create(config)
    if not new_handle or not str(new_handle).strip():
        raise RemoteCreateError(f"Platform returned an empty id for {config.kind.value}")

    env[config.kind.env_key] = str(new_handle)
    logger.info(f"{config.kind.value}: recorded agent {new_handle}")
    return new_handle
