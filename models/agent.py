"""Pydantic models describing a deployable agent."""

from __future__ import annotations

from enum import Enum
from typing import NewType, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Opaque identifier assigned by the remote platform on creation.
RemoteAgentHandle = NewType("RemoteAgentHandle", str)


class AgentKind(str, Enum):
    """The fixed set of retail agents this project deploys."""

    LOYALTY = "loyalty"
    CART_MANAGER = "cart_manager"
    INTERIOR_DESIGN = "interior_design"
    INVENTORY = "inventory"
    SHOPPER = "shopper"

    @classmethod
    def parse(cls, raw: str) -> "AgentKind":
        """Accept both ``cart_manager`` and the workflow spelling ``cart-manager``."""
        normalized = raw.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown agent kind {raw!r} (expected one of: {valid})") from None

    @property
    def env_key(self) -> str:
        """Key under which this kind's handle is recorded in the env store."""
        return self.value


class ToolBinding(BaseModel):
    """A named tool and the implementation behind it.

    ``reference`` is either a built-in Foundry tool name such as
    ``code_interpreter`` or an import reference ``package.module:function``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    reference: str = Field(..., min_length=1)

    @property
    def is_function(self) -> bool:
        return ":" in self.reference


class AgentConfig(BaseModel):
    """Desired state of one agent, loaded once per run."""

    model_config = ConfigDict(frozen=True)

    kind: AgentKind
    name: str = Field(..., min_length=1, description="Display name on the platform")
    description: str = Field(default="")
    prompt: str = Field(..., min_length=1, description="Agent instructions")
    model: str = Field(..., min_length=1, description="Model deployment name")
    tools: Tuple[ToolBinding, ...] = Field(default=())

    @field_validator("prompt", "model")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("tools")
    @classmethod
    def _unique_tool_names(cls, value: Tuple[ToolBinding, ...]) -> Tuple[ToolBinding, ...]:
        names = [t.name for t in value]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"duplicate tool names: {', '.join(dupes)}")
        return value

    @property
    def tool_names(self) -> list[str]:
        return [t.name for t in self.tools]
