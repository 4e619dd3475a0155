from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OLLAMA_SERVER = "http://localhost:11434"


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseSettings):
    env: str = "development"
    api_prefix: str = ""
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    ollama_server: str | None = None
    ollama_model: str = Field(
        default="mistral:7b-instruct",
        validation_alias=AliasChoices("OLLAMA_MODEL", "MODEL"),
    )
    backend_timeout_seconds: float = 30.0

    # Set by hosting platforms such as Vercel; without OLLAMA_SERVER the gateway serves demo answers.
    serverless: bool = Field(default=False, validation_alias=AliasChoices("SERVERLESS", "VERCEL"))
    demo_mode: bool = False
    chat_seed: int | None = None

    allowed_origins: str = "*"
    allowed_methods: str = "GET,POST,OPTIONS"
    allowed_headers: str = "Content-Type,Authorization,X-Requested-With,Origin"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)

    @property
    def backend_url(self) -> str:
        return (self.ollama_server or DEFAULT_OLLAMA_SERVER).rstrip("/")

    @property
    def backend_available(self) -> bool:
        if self.demo_mode:
            return False
        if self.ollama_server:
            return True
        return not self.serverless

    @property
    def cors_origins(self) -> list[str]:
        return _split_csv(self.allowed_origins)

    @property
    def cors_methods(self) -> list[str]:
        return [method.upper() for method in _split_csv(self.allowed_methods)]

    @property
    def cors_headers(self) -> list[str]:
        return _split_csv(self.allowed_headers)

    @property
    def cors_allow_credentials(self) -> bool:
        return "*" not in self.cors_origins


settings = Settings()
