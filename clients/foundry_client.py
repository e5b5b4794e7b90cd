"""Azure AI Foundry client – creates and updates prompt agents in a project."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from loguru import logger

from config.settings import settings
from infra.errors import AgentConfigError, DeploymentError, RemoteCreateError, RemoteUpdateError
from models.agent import AgentConfig, RemoteAgentHandle, ToolBinding
from utils.helpers import resolve_reference


class AgentPlatform(Protocol):
    """The two remote operations the reconciler needs."""

    def create(self, config: AgentConfig) -> RemoteAgentHandle: ...

    def update(self, handle: RemoteAgentHandle, config: AgentConfig) -> None: ...


def _make_tools(bindings: tuple[ToolBinding, ...], bing_connection_id: str = "") -> List[Any]:
    """Convert tool bindings to SDK ToolDefinition objects."""
    from azure.ai.agents.models import (
        BingGroundingTool,
        CodeInterpreterToolDefinition,
        FunctionTool,
    )

    result: List[Any] = []
    functions = []
    for binding in bindings:
        if binding.is_function:
            functions.append(resolve_reference(binding.reference))
        elif binding.reference == "code_interpreter":
            result.append(CodeInterpreterToolDefinition())
        elif binding.reference == "bing_grounding":
            # Bing grounding needs a connection_id from the project
            if not bing_connection_id:
                raise AgentConfigError("bing_grounding requires BING_CONNECTION_ID to be set")
            result.extend(BingGroundingTool(connection_id=bing_connection_id).definitions)
        else:
            raise AgentConfigError(f"Unknown tool '{binding.reference}'")
    if functions:
        result.extend(FunctionTool(functions=set(functions)).definitions)
    return result


class FoundryAgentPlatform:
    """
    AgentPlatform backed by the Foundry Agent Service.

    Every call is a single synchronous attempt.  SDK errors are translated to
    RemoteCreateError / RemoteUpdateError with the original exception chained,
    so the pipeline fails with the platform's own message.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        client: Any = None,
        bing_connection_id: Optional[str] = None,
    ) -> None:
        self._endpoint = endpoint if endpoint is not None else settings.foundry_project_endpoint
        self._client = client
        self._bing_connection_id = (
            bing_connection_id if bing_connection_id is not None else settings.bing_connection_id
        )

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _get_client(self) -> Any:
        if self._client is None:
            from azure.ai.projects import AIProjectClient
            from azure.identity import DefaultAzureCredential

            if not self._endpoint:
                raise DeploymentError(
                    "FOUNDRY_PROJECT_ENDPOINT not set. "
                    "Format: https://<resource>.services.ai.azure.com/api/projects/<project>"
                )
            logger.info(f"Connecting to Foundry project: {self._endpoint}")
            self._client = AIProjectClient(endpoint=self._endpoint, credential=DefaultAzureCredential())
        return self._client

    def _agent_fields(self, config: AgentConfig, clear_tools: bool = False) -> dict:
        tools = _make_tools(config.tools, self._bing_connection_id)
        # On update None means "keep the remote tools"; an empty list clears them.
        if clear_tools:
            tools = tools or []
        elif not tools:
            tools = None
        return {
            "model": config.model,
            "name": config.name,
            "description": config.description,
            "instructions": config.prompt,
            "tools": tools,
        }

    # ── AgentPlatform ─────────────────────────────────────────────────────────

    def create(self, config: AgentConfig) -> RemoteAgentHandle:
        from azure.core.exceptions import AzureError, HttpResponseError

        fields = self._agent_fields(config)
        client = self._get_client()
        logger.info(f"Creating agent {config.name} (model={config.model})")
        try:
            agent = client.agents.create_agent(**fields)
        except HttpResponseError as exc:
            raise RemoteCreateError(f"Foundry refused to create {config.name}: {exc.message or exc}") from exc
        except AzureError as exc:
            raise RemoteCreateError(f"Could not reach Foundry to create {config.name}: {exc}") from exc

        agent_id = getattr(agent, "id", None) or ""
        if not agent_id:
            raise RemoteCreateError(f"Foundry returned no id for {config.name}")
        logger.info(f"Created: {config.name} (id={agent_id})")
        return RemoteAgentHandle(agent_id)

    def update(self, handle: RemoteAgentHandle, config: AgentConfig) -> None:
        from azure.core.exceptions import AzureError, HttpResponseError, ResourceNotFoundError

        fields = self._agent_fields(config, clear_tools=True)
        client = self._get_client()
        logger.info(f"Updating agent {config.name} (id={handle})")
        try:
            client.agents.update_agent(agent_id=handle, **fields)
        except ResourceNotFoundError as exc:
            raise RemoteUpdateError(
                f"Agent {handle} for {config.kind.value} no longer exists; "
                f"clear the recorded id to create a new one",
                handle=handle,
            ) from exc
        except HttpResponseError as exc:
            raise RemoteUpdateError(
                f"Foundry refused to update {handle}: {exc.message or exc}", handle=handle
            ) from exc
        except AzureError as exc:
            raise RemoteUpdateError(f"Could not reach Foundry to update {handle}: {exc}", handle=handle) from exc
        logger.info(f"Updated: {config.name} (id={handle})")
