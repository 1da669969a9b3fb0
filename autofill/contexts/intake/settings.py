"""
Parser settings for the intake context.

Loads heuristic constants from the packaged parser_settings.yaml and applies an
optional override file. Overrides may only replace known keys.

Examples:
    # Packaged defaults (or AUTOFILL_PARSER_SETTINGS if set)
    >>> settings = load_parser_settings()
    >>> settings.name_scan_window
    10

    # Explicit override file
    >>> settings = load_parser_settings(Path("configs/strict_names.yaml"))
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_SETTINGS_PATH = Path(__file__).parent / "parser_settings.yaml"


@dataclass(frozen=True)
class ParserSettings:
    """Flattened heuristic constants (section_key naming, e.g. name_scan_window)."""

    recovery_encoding: str = "utf-8"
    recovery_printable_min: int = 32
    recovery_printable_max: int = 126
    recovery_min_run_length: int = 3
    name_scan_window: int = 10
    name_min_length: int = 2
    name_max_length: int = 60
    name_min_words: int = 2
    name_max_words: int = 5


def _flatten(nested: Dict[str, Any]) -> Dict[str, Any]:
    """Collapse nested structure: name.scan_window -> name_scan_window."""
    flattened = {}
    for section, values in nested.items():
        if not isinstance(values, dict):
            raise ValueError(f"Parser settings section '{section}' must be a mapping")
        for key, value in values.items():
            flattened[f"{section}_{key}"] = value
    return flattened


def _validate_override(base: Dict[str, Any], override: Dict[str, Any], source: Path) -> None:
    unknown = sorted(set(override) - set(base))
    if unknown:
        raise ValueError(
            f"Unknown parser settings in {source}: {unknown}. Available settings: {sorted(base)}"
        )


def load_parser_settings(config_path: Optional[Path] = None) -> ParserSettings:
    """
    Load parser settings, merging an override file over the packaged defaults.

    Args:
        config_path: Optional override YAML (defaults to AUTOFILL_PARSER_SETTINGS env variable,
                     or no override when unset)

    Returns:
        Frozen ParserSettings

    Raises:
        ValueError: If the override contains unknown keys or an invalid byte range
    """
    if config_path is None and os.getenv("AUTOFILL_PARSER_SETTINGS"):
        config_path = Path(os.getenv("AUTOFILL_PARSER_SETTINGS"))

    base = _flatten(OmegaConf.to_container(OmegaConf.load(DEFAULT_SETTINGS_PATH), resolve=True))

    if config_path is not None:
        config_path = Path(config_path)
        override = _flatten(OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {})
        _validate_override(base, override, config_path)
        base.update(override)

    settings = ParserSettings(**base)

    if not 0 <= settings.recovery_printable_min <= settings.recovery_printable_max <= 255:
        raise ValueError(
            f"Invalid printable byte range: "
            f"[{settings.recovery_printable_min}, {settings.recovery_printable_max}]"
        )

    return settings


@lru_cache(maxsize=1)
def default_parser_settings() -> ParserSettings:
    """Settings used when a caller does not pass its own. Loaded once per process."""
    return load_parser_settings()
