"""Build documentation sidebars and topic skeletons from outline files.

This package exposes the CLI entry points used by the ``skelo`` console
script along with the outline engine in :mod:`skelo.outline`.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from skelo import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
