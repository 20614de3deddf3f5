"""Named directive-set profiles loaded from YAML."""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml

from cspheader.config.loader import get_settings
from cspheader.directives import Directives
from cspheader.policy import policy

logger = structlog.get_logger()


class PresetNotFoundError(KeyError):
    """Raised when a preset name is not defined in the presets file."""


# Cache loaded presets, keyed by the file they came from
_presets: dict | None = None
_presets_path: Path | None = None


def load_presets() -> dict:
    """Load policy presets from YAML, caching after first load.

    The cache is dropped when CSP_PRESETS_FILE points somewhere new. A missing
    file, or one whose top level is not a mapping, yields no presets.
    """
    global _presets, _presets_path
    path = Path(get_settings().presets_file)
    if _presets is not None and path == _presets_path:
        return _presets
    _presets_path = path
    if not path.exists():
        logger.error("policy_presets_not_found", path=str(path))
        _presets = {}
        return _presets
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        logger.error("policy_presets_invalid", path=str(path), type=type(data).__name__)
        data = {}
    _presets = data
    logger.debug("policy_presets_loaded", path=str(path), presets=list(_presets))
    return _presets


def reset_presets_cache() -> None:
    """Reset the presets cache (for testing)."""
    global _presets, _presets_path
    _presets = None
    _presets_path = None


def get_preset(name: str) -> Directives:
    """Return the named preset as a Directives instance.

    Raises:
        PresetNotFoundError: name is not defined.
        pydantic.ValidationError: the entry names an unknown directive or
            has a value of the wrong shape.
    """
    presets = load_presets()
    if name not in presets:
        logger.warning("policy_preset_unknown", preset=name, available=sorted(presets))
        raise PresetNotFoundError(name)
    return Directives.model_validate(presets[name] or {})


def preset_policy(name: str | None = None) -> str:
    """Serialize a preset, defaulting to the configured CSP_DEFAULT_PRESET."""
    if name is None:
        name = get_settings().default_preset
    return policy(get_preset(name))
