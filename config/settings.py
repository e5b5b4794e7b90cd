"""Application configuration using pydantic-settings."""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration loaded from environment / .env file."""

    # ── Azure AI Foundry ──────────────────────────────────────────────────────
    # Project endpoint format:
    #   https://<AIFoundryResourceName>.services.ai.azure.com/api/projects/<ProjectName>
    foundry_project_endpoint: str = Field(
        default="",
        description="Azure AI Foundry project endpoint (required for deploy)",
    )
    model_deployment_name: str = Field(
        default="gpt-4o",
        description="Fallback model deployment when the env store has none",
    )
    bing_connection_id: str = Field(
        default="",
        description="Connection id used by the bing_grounding tool",
    )

    # ── Agent sources ─────────────────────────────────────────────────────────
    # The env store is the KEY=VALUE file the pipeline writes from its secret.
    env_store_path: str = Field(default=".env")
    prompts_dir: str = Field(default="prompts")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
