"""Client configuration: explicit values, TOML file, environment fallback."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli
from pydantic import BaseModel, ConfigDict, model_validator

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"

BASE_URL = "https://api.wallex.ir"
API_KEY_HEADER = "x-api-key"
API_KEY_ENV = "WALLEX_API_KEY"


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    base_url: str = BASE_URL
    timeout: float = 10.0

    @model_validator(mode="before")
    @classmethod
    def _api_key_from_env(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("api_key"):
            data = {**data, "api_key": os.environ.get(API_KEY_ENV, "")}
        return data


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomli.load(f)


def load_config(path: Path | None = None) -> ClientConfig:
    p = path or CONFIG_DIR / "default.toml"
    raw: dict[str, Any] = {}
    if p.exists():
        raw = _load_toml(p).get("client", {})
    return ClientConfig(**raw)
