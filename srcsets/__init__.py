# SPDX-License-Identifier: MIT
"""
Srcsets: source-set graph configuration for multiplatform builds.

Srcsets creates compilation targets from presets, links native targets
into a shared native/Apple source-set hierarchy and applies the standard
Android, compiler and test-logging settings of a library module.
"""

from __future__ import annotations

import json
import os

# Re-export commonly used classes for convenient imports
from srcsets.configure.config import (
    AndroidSettings,
    Configure,
    TestLoggingSettings,
)
from srcsets.core.linker import SourceSetGraphLinker
from srcsets.core.presets import PRESETS, TargetPreset
from srcsets.core.project import Project
from srcsets.core.standard import standard_configuration

__version__ = "0.1.0"

# Internal storage for CLI variables
_cli_vars: dict[str, str] | None = None


def get_var(name: str, default: str | None = None) -> str | None:
    """Get a configuration variable set on the command line or from environment.

    Variables can be set when invoking srcsets:
        srcsets graph IDE_ACTIVE=1

    Precedence (highest to lowest):
        1. Command line: srcsets graph VAR=value (passed via SRCSETS_VARS)
        2. Environment variable: VAR=value srcsets graph

    Args:
        name: Variable name.
        default: Default value if not set.

    Returns:
        The variable value, or default if not set.
    """
    global _cli_vars

    # Lazy-load CLI vars from environment on first access
    if _cli_vars is None:
        srcsets_vars = os.environ.get("SRCSETS_VARS")
        if srcsets_vars:
            try:
                _cli_vars = json.loads(srcsets_vars)
            except json.JSONDecodeError:
                _cli_vars = {}
        else:
            _cli_vars = {}

    if name in _cli_vars:
        return _cli_vars[name]

    return os.environ.get(name, default)


def _reset_vars() -> None:
    """Forget cached CLI variables (called by the CLI after setting them)."""
    global _cli_vars
    _cli_vars = None


# Public API exports
__all__ = [
    "__version__",
    "get_var",
    "AndroidSettings",
    "Configure",
    "TestLoggingSettings",
    "PRESETS",
    "TargetPreset",
    "Project",
    "SourceSetGraphLinker",
    "standard_configuration",
]
