"""Application configuration helpers."""

from __future__ import annotations

from functools import lru_cache
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..models.library import AGENTS_SOURCE, CONTENT_SOURCE, SourceRoot

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_CONTENT_DIR = PROJECT_ROOT / "content"
DEFAULT_AGENTS_DIR = PROJECT_ROOT / "agents"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://localhost:5173")
LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


class AppConfig(BaseModel):
    """Runtime configuration loaded from environment variables."""

    model_config = ConfigDict(frozen=True)

    content_dir: Path = Field(
        default=DEFAULT_CONTENT_DIR, description="Root directory of the content source"
    )
    agents_dir: Path = Field(
        default=DEFAULT_AGENTS_DIR, description="Root directory of the agents source"
    )
    default_source: str = Field(
        default=CONTENT_SOURCE,
        description="Source used for paths without a recognised source prefix",
    )
    log_level: str = Field(default="info", description="uvicorn log level")
    port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @field_validator("content_dir", "agents_dir", mode="before")
    @classmethod
    def _normalize_root(cls, value: str | Path | None) -> Path:
        if value is None or value == "":
            raise ValueError("Source directories cannot be empty")
        if isinstance(value, Path):
            path = value
        else:
            path = Path(value)
        return path.expanduser().resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        cleaned = (value or "").strip().lower()
        if cleaned not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")
        return cleaned

    @model_validator(mode="after")
    def _check_default_source(self) -> "AppConfig":
        known = {root.source_id for root in self.source_roots()}
        if self.default_source not in known:
            raise ValueError(
                f"DEFAULT_SOURCE must name a configured source: {sorted(known)}"
            )
        return self

    def source_roots(self) -> List[SourceRoot]:
        """Configured roots in display order (content before agents)."""
        return [
            SourceRoot(source_id=CONTENT_SOURCE, directory=self.content_dir),
            SourceRoot(source_id=AGENTS_SOURCE, directory=self.agents_dir),
        ]


def _read_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


def _split_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Load and cache application configuration."""
    return AppConfig(
        content_dir=_read_env("CONTENT_DIR", str(DEFAULT_CONTENT_DIR)),
        agents_dir=_read_env("AGENTS_DIR", str(DEFAULT_AGENTS_DIR)),
        default_source=_read_env("DEFAULT_SOURCE", CONTENT_SOURCE),
        log_level=_read_env("LOG_LEVEL", "info"),
        port=int(_read_env("PORT", "8000")),
        cors_origins=_split_origins(_read_env("CORS_ORIGINS")),
    )


def reload_config() -> AppConfig:
    """Clear cached config (useful for tests) and reload."""
    get_config.cache_clear()
    return get_config()


__all__ = [
    "AppConfig",
    "get_config",
    "reload_config",
    "PROJECT_ROOT",
    "DEFAULT_CONTENT_DIR",
    "DEFAULT_AGENTS_DIR",
]
