"""Load and resolve skelo configuration.

The configuration file (``skelo.config.json`` by default, YAML also accepted)
overrides the defaults in :class:`SkeloConfig`; command-line options then
override the file through :meth:`SkeloConfig.with_overrides`.

Examples
--------
>>> from pathlib import Path
>>> from skelo.config import load_config
>>> config = load_config(Path("skelo.config.json"))  # doctest: +SKIP
>>> config.with_overrides(docs=Path("site/docs")).docs  # doctest: +SKIP
PosixPath('site/docs')
"""

from .loader import default_config_payload, load_config, write_default_config
from .models import ConfigError, SkeloConfig, TemplateNames

__all__ = [
    "ConfigError",
    "SkeloConfig",
    "TemplateNames",
    "default_config_payload",
    "load_config",
    "write_default_config",
]
