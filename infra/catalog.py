"""
catalog.py – Agent definitions and the loader that turns them into AgentConfig.

Each AgentKind has one entry: display name, description, the prompt file it
reads from ``settings.prompts_dir`` and the tools it is bound to.  The model
deployment comes from the env store so one secret drives every agent.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Optional

from loguru import logger
from pydantic import ValidationError

from config.settings import settings
from infra.errors import AgentConfigError
from models.agent import AgentConfig, AgentKind, ToolBinding
from utils.helpers import resolve_reference

MODEL_ENV_KEY = "MODEL_DEPLOYMENT_NAME"

# Built-in Foundry tools referenced by name rather than by import path.
BUILTIN_TOOLS = {"code_interpreter", "bing_grounding"}


# ═══════════════════════════════════════════════════════════════════════════════
#  Agent definitions (with tools)
# ═══════════════════════════════════════════════════════════════════════════════

AGENTS: Dict[AgentKind, dict] = {
    AgentKind.LOYALTY: {
        "name": "LoyaltyAgent",
        "description": "Works out loyalty discounts for a customer's cart.",
        "prompt_file": "loyalty.txt",
        "tools": [("calculate_discount", "tools.loyalty:calculate_discount")],
    },
    AgentKind.CART_MANAGER: {
        "name": "CartManagerAgent",
        "description": "Adds and removes products from the shopping cart.",
        "prompt_file": "cart_manager.txt",
        "tools": [
            ("add_to_cart", "tools.cart:add_to_cart"),
            ("remove_from_cart", "tools.cart:remove_from_cart"),
        ],
    },
    AgentKind.INTERIOR_DESIGN: {
        "name": "InteriorDesignAgent",
        "description": "Suggests products that fit a room and design style.",
        "prompt_file": "interior_design.txt",
        "tools": [
            ("recommend_products", "tools.interior_design:recommend_products"),
            ("code_interpreter", "code_interpreter"),
        ],
    },
    AgentKind.INVENTORY: {
        "name": "InventoryAgent",
        "description": "Answers stock availability questions.",
        "prompt_file": "inventory.txt",
        "tools": [("check_stock", "tools.inventory:check_stock")],
    },
    AgentKind.SHOPPER: {
        "name": "ShopperAgent",
        "description": "Front-of-store assistant that greets customers and finds products.",
        "prompt_file": "shopper.txt",
        "tools": [("search_products", "tools.shopper:search_products")],
    },
}


def _check_binding(binding: ToolBinding) -> None:
    if binding.is_function:
        try:
            fn = resolve_reference(binding.reference)
        except (ImportError, AttributeError, TypeError, ValueError) as exc:
            raise AgentConfigError(f"Tool {binding.name!r}: cannot resolve {binding.reference}: {exc}") from exc
        if fn.__name__ != binding.name:
            # Foundry names function tools after the callable, not the binding.
            logger.warning(f"Tool {binding.name!r} is exposed to the model as {fn.__name__!r}")
    elif binding.reference not in BUILTIN_TOOLS:
        raise AgentConfigError(
            f"Tool {binding.name!r}: unknown built-in tool {binding.reference!r} "
            f"(expected one of {sorted(BUILTIN_TOOLS)} or 'module:function')"
        )


def read_prompt(prompt_file: str, prompts_dir: Optional[str] = None) -> str:
    path = Path(prompts_dir or settings.prompts_dir) / prompt_file
    try:
        text = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AgentConfigError(f"Cannot read prompt file {path}: {exc}") from exc
    if not text:
        raise AgentConfigError(f"Prompt file {path} is empty")
    return text


def load_agent_config(
    kind: AgentKind,
    env: Mapping[str, str],
    prompts_dir: Optional[str] = None,
) -> AgentConfig:
    """Build the desired AgentConfig for ``kind`` from its prompt file and the env store."""
    definition = AGENTS[kind]
    model = (env.get(MODEL_ENV_KEY) or "").strip() or settings.model_deployment_name
    bindings: List[ToolBinding] = [ToolBinding(name=n, reference=r) for n, r in definition["tools"]]
    for binding in bindings:
        _check_binding(binding)

    try:
        config = AgentConfig(
            kind=kind,
            name=definition["name"],
            description=definition["description"],
            prompt=read_prompt(definition["prompt_file"], prompts_dir),
            model=model,
            tools=tuple(bindings),
        )
    except ValidationError as exc:
        raise AgentConfigError(f"Invalid configuration for {kind.value}: {exc}") from exc

    logger.info(f"Loaded {kind.value}: model={config.model} tools={config.tool_names or '(none)'}")
    return config
