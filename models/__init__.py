from .agent import (
    AgentConfig,
    AgentKind,
    RemoteAgentHandle,
    ToolBinding,
)

__all__ = [
    "AgentConfig",
    "AgentKind",
    "RemoteAgentHandle",
    "ToolBinding",
]
