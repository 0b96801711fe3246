"""Environment-driven configuration."""

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


def _load_env_file() -> None:
    """Load .env from the project root if present."""
    env_path = Path(__file__).parent.parent / ".env"
    if not env_path.is_file():
        return
    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#") and "=" in stripped:
            key, value = stripped.split("=", 1)
            key, value = key.strip(), value.strip().strip("'\"")
            if key and value and key not in os.environ:
                os.environ[key] = value


_load_env_file()


DEFAULT_APP_NAME = "Agent Chat Server"
DEFAULT_APP_VERSION = "0.1.0"
DEFAULT_LLM_BASE_URL = "https://api.openai.com/v1"


def _env_int(name: str, fallback: int) -> int:
    try:
        return int(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


def _env_float(name: str, fallback: float) -> float:
    try:
        return float(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


def _env_flag(name: str, fallback: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return fallback
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _get_port() -> int:
    """Get server port, checking the platform PORT first, then AGENT_PORT."""
    port = os.getenv("PORT") or os.getenv("AGENT_PORT")
    if port:
        try:
            return int(port)
        except ValueError:
            pass
    return 8001


class Settings(BaseModel):
    """Application settings with lightweight env fallbacks."""

    # App metadata
    app_name: str = Field(default=DEFAULT_APP_NAME)
    app_version: str = Field(default=DEFAULT_APP_VERSION)

    # Server runtime
    server_host: str = Field(default_factory=lambda: os.getenv("AGENT_HOST", "0.0.0.0"))
    server_port: int = Field(default_factory=_get_port)

    # Agent
    agent_model: str = Field(default_factory=lambda: os.getenv("AGENT_MODEL", "gpt-4o-mini"))
    agent_system_prompt: Optional[str] = Field(default_factory=lambda: os.getenv("AGENT_SYSTEM_PROMPT"))
    agent_max_steps: int = Field(default_factory=lambda: _env_int("AGENT_MAX_STEPS", 5))

    # Model provider
    llm_api_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY") or os.getenv("OPENAI_API_KEY")
    )
    llm_base_url: str = Field(default_factory=lambda: os.getenv("LLM_BASE_URL", DEFAULT_LLM_BASE_URL))
    llm_timeout: float = Field(default_factory=lambda: _env_float("AGENT_LLM_TIMEOUT", 60.0))

    # HTTP behaviour
    strict_status_codes: bool = Field(default_factory=lambda: _env_flag("AGENT_STRICT_STATUS_CODES"))
    cors_allow_origins_raw: str = Field(default_factory=lambda: os.getenv("AGENT_CORS_ALLOW_ORIGINS", "*"))
    enable_docs: bool = Field(default_factory=lambda: os.getenv("AGENT_ENABLE_DOCS", "1") != "0")
    docs_url: Optional[str] = Field(default_factory=lambda: os.getenv("AGENT_DOCS_URL", "/docs"))

    @property
    def cors_allow_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_allow_origins_raw.strip() in {"", "*"}:
            return ["*"]
        return [origin.strip() for origin in self.cors_allow_origins_raw.split(",") if origin.strip()]

    @property
    def resolved_docs_url(self) -> Optional[str]:
        """Return documentation URL when docs are enabled."""
        return (self.docs_url or "/docs") if self.enable_docs else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
