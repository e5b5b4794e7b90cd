"""Errors raised by the deployment step.

Everything derives from ``DeploymentError`` so the CLI can fail the pipeline
run with one handler.  None of these are retried or recovered locally.
"""

from __future__ import annotations


class DeploymentError(Exception):
    """Base class for failures that should stop the pipeline run."""


class AgentConfigError(DeploymentError):
    """The agent definition on disk is incomplete or invalid."""


class EnvironmentStoreError(DeploymentError):
    """The KEY=VALUE env store could not be read or written."""


class RemoteCreateError(DeploymentError):
    """The platform refused to create the agent (quota, invalid prompt, ...)."""


class RemoteUpdateError(DeploymentError):
    """The platform refused the update, e.g. the recorded handle is stale."""

    def __init__(self, message: str, handle: str = "") -> None:
        super().__init__(message)
        self.handle = handle
