"""Configuration helpers for the LLM Relay CLI."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import json
import typer

CONFIG_DIR = Path.home() / ".llm_relay"
CONFIG_PATH = CONFIG_DIR / "config.json"

DEFAULT_BASE_URL = "http://localhost:8000"


@dataclass
class Config:
    base_url: str = DEFAULT_BASE_URL
    api_prefix: str = "/api"
    default_provider: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        return cls(
            base_url=data.get("base_url") or DEFAULT_BASE_URL,
            api_prefix=data.get("api_prefix") or "/api",
            default_provider=data.get("default_provider"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_config() -> Config:
    """Saved config, or the defaults when nothing has been configured yet."""
    if not CONFIG_PATH.exists():
        return Config()

    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
        return Config.from_dict(data)
    except (OSError, ValueError) as exc:
        typer.echo(f"설정 파일을 읽을 수 없습니다: {exc}", err=True)
        raise typer.Exit(1) from exc


def save_config(config: Config) -> None:
    # API 키는 절대 저장하지 않는다
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(config.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    typer.echo(f"설정이 저장되었습니다: {CONFIG_PATH}")
