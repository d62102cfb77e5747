from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from bflite.state import DEFAULT_TAPE_SIZE

ENV_TAPE_SIZE = "BFLITE_TAPE_SIZE"
ENV_STEP_LIMIT = "BFLITE_STEP_LIMIT"


def repo_root() -> Path:
    # Directory containing the `bflite/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


class RunConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    tape_size: int = Field(default=DEFAULT_TAPE_SIZE, ge=1)
    step_limit: int | None = Field(default=None, ge=1)

    @field_validator("step_limit", mode="before")
    @classmethod
    def _unlimited(cls, v: Any) -> Any:
        # "none" and 0 both mean no limit, matching how env timeouts are read.
        if isinstance(v, str) and v.strip().lower() in {"", "none", "0"}:
            return None
        if v == 0:
            return None
        return v


def load_settings(**overrides: Any) -> RunConfig:
    """Build a `RunConfig` from the environment (and `.env`), then apply overrides.

    Overrides whose value is None are ignored so CLI flags that were not
    given fall through to the environment.
    """
    load_env()
    data: dict[str, Any] = {}
    for field_name, env_var in (("tape_size", ENV_TAPE_SIZE), ("step_limit", ENV_STEP_LIMIT)):
        raw = os.getenv(env_var)
        if raw is not None and raw.strip():
            data[field_name] = raw.strip()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return RunConfig.model_validate(data)
