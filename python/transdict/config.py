"""Configuration loader for transdict.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any, Optional

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "encoding": "utf-8",
    "bootstrap_dict": "default",
    "verbose": False,
    "help_width": 42,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/transdict -> root
        Path(__file__).parent.parent / "config.json",
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load(path: Optional[Path | str] = None) -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks.

    Args:
        path: Explicit config file. Searched for when omitted.
    """
    global _config
    if _config is not None and path is None:
        return _config

    config_path = Path(path) if path is not None else _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                _config = data
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": dict(FALLBACK_DEFAULTS)}
    return _config


def reset() -> None:
    """Drop the cached configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_encoding() -> str:
    return get_default("encoding", FALLBACK_DEFAULTS["encoding"])


def default_bootstrap_dict() -> str:
    return get_default("bootstrap_dict", FALLBACK_DEFAULTS["bootstrap_dict"])


def default_verbose() -> bool:
    return bool(get_default("verbose", FALLBACK_DEFAULTS["verbose"]))


def default_help_width() -> int:
    return int(get_default("help_width", FALLBACK_DEFAULTS["help_width"]))
