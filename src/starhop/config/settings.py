#!/usr/bin/env python3
from __future__ import annotations
import os
from pathlib import Path
from typing import Optional, Dict, Any

try:
    import tomllib  # py3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # py3.9/3.10

# Order of precedence:
# 1) Environment variables
# 2) config/starhop.toml (if present)
# 3) config/starhop.example.toml (fallback for non-secret defaults)

ROOT = Path(__file__).resolve().parents[3]

DEFAULT_BASE_URL = "https://swapi.dev/api/starships/"
DEFAULT_USER_AGENT = "starhop/0.1"


def _read_toml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def _merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """shallow merge dict b into a"""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = {**out[k], **v}
        else:
            out[k] = v
    return out


class Settings:
    def __init__(self, root: Optional[Path] = None):
        root = Path(root) if root else ROOT
        cfg = _merge(
            _read_toml(root / "config" / "starhop.example.toml"),
            _read_toml(root / "config" / "starhop.toml"),
        )

        def _node(cfg_path: list[str]) -> Any:
            node: Any = cfg
            for key in cfg_path:
                if not isinstance(node, dict) or key not in node:
                    return None
                node = node[key]
            return node

        def env_or(cfg_path: list[str], env_name: str, default: Optional[str] = None) -> Optional[str]:
            if env_name in os.environ and os.environ[env_name]:
                return os.environ[env_name]
            node = _node(cfg_path)
            val = node if isinstance(node, str) and node else None
            return val or default

        def _int(default: int, cfg_path: list[str], env_name: str) -> int:
            v = os.environ.get(env_name, "").strip()
            if v.isdigit():
                return int(v)
            node = _node(cfg_path)
            if isinstance(node, int) and not isinstance(node, bool):
                return node
            return default

        self.SWAPI_BASE_URL = env_or(["SWAPI", "BASE_URL"], "SWAPI_BASE_URL", DEFAULT_BASE_URL)
        self.USER_AGENT = env_or(["SWAPI", "USER_AGENT"], "STARHOP_USER_AGENT", DEFAULT_USER_AGENT)
        self.REQUEST_TIMEOUT_SEC = _int(30, ["Defaults", "REQUEST_TIMEOUT_SEC"], "REQUEST_TIMEOUT_SEC")


settings = Settings()
