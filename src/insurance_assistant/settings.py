"""
insurance_assistant.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `ASSISTANT_`).
    Defaults are safe for local dev; prod must override the token secret.
    """

    model_config = SettingsConfigDict(env_prefix="ASSISTANT_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "insurance-assistant"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Identity tokens
    jwt_alg: str = "HS256"
    jwt_issuer: str = "insurance-assistant"
    jwt_audience: str = "insurance-assistant-chat"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Custom claim carrying the customer id of the signed-in user.
    customer_id_claim: str = "insurance_user_id"

    # Upstream insurance REST service
    insurance_api_base_url: str = "http://localhost:8081/api/v1"
    insurance_api_timeout_seconds: float = Field(default=10.0, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Core security modules never import this directly; values are passed in at the composition
# root (`api.app.create_app`) so they stay testable without env setup.
