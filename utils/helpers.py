"""Utility helper functions."""

from __future__ import annotations

import importlib
import json
from typing import Any, Callable


def resolve_reference(reference: str) -> Callable[..., Any]:
    """Import ``package.module:attr`` and return the callable it names."""
    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Invalid reference {reference!r} (expected 'module:function')")
    module = importlib.import_module(module_name)
    target: Any = module
    for part in attr.split("."):
        target = getattr(target, part)
    if not callable(target):
        raise TypeError(f"{reference} is not callable")
    return target


def to_json(payload: Any) -> str:
    """Serialise a tool result; function tools hand strings back to the model."""
    return json.dumps(payload, default=str)
