"""Common literal values used across skelo.

Filenames, glob patterns, and bundled resource locations live here so the
CLI, configuration loader, and tests import the same values.

Examples
--------
>>> from skelo import _constants
>>> _constants.OUTLINE_FILENAME_TEMPLATE.format(slug="guides")
'guides.outline.yaml'
>>> _constants.DEFAULT_TEMPLATES_DIR.name
'templates'
"""

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_TEMPLATES_DIR = PACKAGE_ROOT / "templates"
DEFAULT_SCHEMA_PATH = PACKAGE_ROOT / "schemas" / "outline.schema.json"

DEFAULT_CONFIG_FILE = Path("skelo.config.json")
FALLBACK_PATTERNS = (
    "**/*.outline.yaml",
    "**/*.outline.yml",
    "__outlines__/**/*.yaml",
    "__outlines__/**/*.yml",
)
OUTLINE_FILENAME_TEMPLATE = "{slug}.outline.yaml"
TOPIC_EXTENSION = "md"
DEFAULT_TEMPLATE_EXTENSION = ".jinja"
