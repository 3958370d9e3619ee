"""Load skelo configuration files into :class:`SkeloConfig`."""

from __future__ import annotations

import collections.abc as cabc
import json
import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import ConfigError, SkeloConfig, TemplateNames

logger = logging.getLogger(__name__)

PATH_OPTIONS = ("docs", "sidebars_filename", "templates", "schema_filename")
FLAG_OPTIONS = ("verbose", "sort_sidebars", "overwrite_topics")


def load_config(path: Path) -> SkeloConfig:
    """Load a JSON or YAML configuration file merged over the defaults.

    Parameters
    ----------
    path : Path
        Location of the configuration file (``skelo.config.json`` by
        default). JSON is parsed with the YAML loader, which accepts it as a
        subset.

    Returns
    -------
    SkeloConfig
        Defaults overridden by the file's values. Relative paths in the file
        are resolved against the file's directory. When the file does not
        exist a warning is logged and the defaults are returned.

    Raises
    ------
    ConfigError
        If the file cannot be read or parsed, is not a mapping, or holds
        values of the wrong type.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_config(Path("skelo.config.json"))  # doctest: +SKIP
    >>> config.sidebars_filename  # doctest: +SKIP
    PosixPath('/work/site/sidebars.js')
    """
    resolved = path.resolve()
    if not resolved.exists():
        logger.warning("Config file not found at %s. Using default options.", resolved)
        return SkeloConfig()

    loader = YAML(typ="safe")
    try:
        with resolved.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except (OSError, YAMLError) as exc:
        msg = f"Error reading or parsing config file '{resolved}': {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Config file '{resolved}' must contain a mapping."
        raise ConfigError(msg)
    return _build_config(loaded, base_dir=resolved.parent)


def _build_config(raw: cabc.Mapping[str, typ.Any], *, base_dir: Path) -> SkeloConfig:
    """Build a SkeloConfig from a parsed mapping rooted at ``base_dir``."""
    defaults = SkeloConfig()
    values: dict[str, typ.Any] = {}

    for key in PATH_OPTIONS:
        value = raw.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            msg = f"Config option '{key}' must be a string path."
            raise ConfigError(msg)
        values[key] = base_dir / value

    for key in FLAG_OPTIONS:
        value = raw.get(key)
        if value is None:
            continue
        if not isinstance(value, bool):
            msg = f"Config option '{key}' must be true or false."
            raise ConfigError(msg)
        values[key] = value

    patterns = raw.get("fallback_patterns")
    if patterns is not None:
        if not isinstance(patterns, list) or not all(
            isinstance(pattern, str) for pattern in patterns
        ):
            msg = "Config option 'fallback_patterns' must be a list of strings."
            raise ConfigError(msg)
        values["fallback_patterns"] = list(patterns)

    extension = raw.get("template_extension")
    if extension is not None:
        if not isinstance(extension, str):
            msg = "Config option 'template_extension' must be a string."
            raise ConfigError(msg)
        values["template_extension"] = extension

    values["template_names"] = _build_template_names(raw.get("template_names"))
    return defaults.with_overrides(**values)


def _build_template_names(payload: object) -> TemplateNames:
    """Merge an optional template-name mapping over the defaults."""
    base = TemplateNames()
    if payload is None:
        return base
    if not isinstance(payload, dict):
        msg = "Config option 'template_names' must be a mapping."
        raise ConfigError(msg)
    return TemplateNames(
        sidebars=payload.get("sidebars", base.sidebars),
        topic=payload.get("topic", base.topic),
        heading=payload.get("heading", base.heading),
    )


def default_config_payload() -> dict[str, typ.Any]:
    """Return the default configuration as a key-sorted, JSON-ready mapping."""
    defaults = SkeloConfig()
    payload: dict[str, typ.Any] = {
        "docs": str(defaults.docs),
        "fallback_patterns": sorted(defaults.fallback_patterns),
        "overwrite_topics": defaults.overwrite_topics,
        "schema_filename": None,
        "sidebars_filename": str(defaults.sidebars_filename),
        "sort_sidebars": defaults.sort_sidebars,
        "template_extension": defaults.template_extension,
        "template_names": {
            "heading": defaults.template_names.heading,
            "sidebars": defaults.template_names.sidebars,
            "topic": defaults.template_names.topic,
        },
        "templates": None,
        "verbose": defaults.verbose,
    }
    return dict(sorted(payload.items()))


def write_default_config(path: Path) -> Path:
    """Write the default configuration to ``path`` as indented JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(default_config_payload(), indent=2) + "\n", encoding="utf-8"
    )
    return path


__all__ = ["default_config_payload", "load_config", "write_default_config"]
