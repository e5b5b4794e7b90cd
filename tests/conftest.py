"""Shared fixtures: an in-memory platform and a scratch prompts directory."""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

import pytest

from infra.errors import RemoteCreateError, RemoteUpdateError
from models.agent import AgentConfig, AgentKind, RemoteAgentHandle


class FakePlatform:
    """Records create/update calls and hands out sequential handles."""

    def __init__(self) -> None:
        self.created: List[AgentConfig] = []
        self.updated: List[Tuple[RemoteAgentHandle, AgentConfig]] = []
        self.agents: Dict[str, AgentConfig] = {}
        self.stale: Set[str] = set()
        self.create_error: Optional[str] = None
        self.next_handle: Optional[str] = None

    def create(self, config: AgentConfig) -> RemoteAgentHandle:
        self.created.append(config)
        if self.create_error:
            raise RemoteCreateError(self.create_error)
        handle = self.next_handle if self.next_handle is not None else f"asst_{len(self.created)}"
        self.agents[handle] = config
        return RemoteAgentHandle(handle)

    def update(self, handle: RemoteAgentHandle, config: AgentConfig) -> None:
        self.updated.append((handle, config))
        if handle in self.stale or handle not in self.agents:
            raise RemoteUpdateError(f"agent {handle} not found", handle=handle)
        self.agents[handle] = config


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def make_config():
    def _make(kind: AgentKind = AgentKind.CART_MANAGER, prompt: str = "You are a cart manager", **kwargs):
        return AgentConfig(
            kind=kind,
            name=kwargs.pop("name", kind.value),
            prompt=prompt,
            model=kwargs.pop("model", "gpt-4o"),
            **kwargs,
        )

    return _make


@pytest.fixture
def prompts_dir(tmp_path):
    path = tmp_path / "prompts"
    path.mkdir()
    for kind in AgentKind:
        (path / f"{kind.value}.txt").write_text(f"You are the {kind.value} agent.\n", encoding="utf-8")
    return path
