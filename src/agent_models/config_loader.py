"""Loading model configuration from YAML or JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from agent_models.models.models_config import AgentConfig, ModelsConfig


def read_config_document(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        raw = yaml.safe_load(text)
    elif suffix == ".json":
        raw = json.loads(text)
    else:
        raise ValueError(f"Unsupported config file type: {path.suffix or '<none>'}")
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level.")
    return raw


def load_agent_config(path: Path | str) -> AgentConfig:
    raw = read_config_document(Path(path))
    if "models" not in raw and "providers" in raw:
        return AgentConfig(models=ModelsConfig.model_validate(raw))
    return AgentConfig.model_validate(raw)
