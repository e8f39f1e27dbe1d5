"""
Run-configuration file loading (JSON or YAML).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from modevo.engine.algorithm.config import DEConfig, DEConfigData
from modevo.foundation.exceptions import ConfigurationError


def load_config(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML or JSON configuration mapping.
    """
    cfg_path = Path(path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file '{cfg_path}' does not exist.")
    suffix = cfg_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise ImportError("YAML config requested but PyYAML is not installed. Install with 'pip install modevo[yaml]'.") from exc
        with cfg_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    else:
        with cfg_path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file '{cfg_path}' must contain a mapping at the top level.",
            details={"path": str(cfg_path)},
        )
    return data


def load_de_config(path: str | Path) -> DEConfigData:
    """Load a file and build the differential evolution parameters from it."""
    data = load_config(path)
    section = data.get("de", data)
    return DEConfig.from_dict(section)


__all__ = ["load_config", "load_de_config"]
