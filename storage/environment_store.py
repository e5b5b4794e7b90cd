"""Flat KEY=VALUE store holding the model deployment and recorded agent ids."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Dict, Iterator, MutableMapping, Optional, Union

from dotenv import dotenv_values, set_key
from loguru import logger

from infra.errors import EnvironmentStoreError


class EnvironmentStore(MutableMapping[str, str]):
    """
    In-memory view of the pipeline's env secret.

    The secret is a dotenv-style text (one ``KEY=VALUE`` per line).  It is
    parsed once at start-up and passed explicitly to whoever needs it; the
    store itself never touches the filesystem unless ``save`` is called.
    Keys written after loading are tracked in ``changes`` so the caller can
    decide whether the backing secret needs to be persisted.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(values or {})
        self._changes: Dict[str, str] = {}

    # ── Loading ───────────────────────────────────────────────────────────────

    @classmethod
    def from_text(cls, text: str) -> "EnvironmentStore":
        try:
            parsed = dotenv_values(stream=io.StringIO(text), interpolate=False)
        except Exception as exc:
            raise EnvironmentStoreError(f"Could not parse env store: {exc}") from exc
        # Bare keys without "=" parse as None; treat them as empty.
        return cls({k: v or "" for k, v in parsed.items()})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "EnvironmentStore":
        path = Path(path)
        if not path.exists():
            logger.info(f"Env store {path} not found; starting empty.")
            return cls()
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise EnvironmentStoreError(f"Could not read env store {path}: {exc}") from exc
        store = cls.from_text(text)
        logger.debug(f"Loaded {len(store)} keys from {path}.")
        return store

    # ── Mapping protocol ──────────────────────────────────────────────────────

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not key or "=" in key or "\n" in key:
            raise EnvironmentStoreError(f"Invalid env store key: {key!r}")
        if "\n" in value:
            raise EnvironmentStoreError(f"Value for {key} must be a single line")
        self._values[key] = value
        self._changes[key] = value

    def __delitem__(self, key: str) -> None:
        raise EnvironmentStoreError("Keys are never removed from the env store")

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"EnvironmentStore(keys={list(self._values)})"

    # ── Change tracking / persistence ─────────────────────────────────────────

    @property
    def changes(self) -> Dict[str, str]:
        """Keys written since the store was loaded."""
        return dict(self._changes)

    @property
    def dirty(self) -> bool:
        return bool(self._changes)

    def save(self, path: Union[str, Path]) -> Path:
        """Write the changed keys into ``path``; every other line is left as it was."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
            for key, value in self._changes.items():
                set_key(path, key, value, quote_mode="auto")
        except OSError as exc:
            raise EnvironmentStoreError(f"Could not write env store {path}: {exc}") from exc
        logger.info(f"Env store {path}: wrote {', '.join(self._changes) or 'no changes'}")
        self._changes.clear()
        return path
