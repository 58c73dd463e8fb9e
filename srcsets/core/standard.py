# SPDX-License-Identifier: MIT
"""Standard configuration pass for a multiplatform library module."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from srcsets.configure.config import AndroidSettings, TestLoggingSettings
from srcsets.core.presets import resolve_presets

if TYPE_CHECKING:
    from srcsets.core.project import Project

logger = logging.getLogger(__name__)


def standard_configuration(
    project: Project,
    *preset_names: str,
    is_test_module: bool = False,
    android: AndroidSettings | None = None,
    tests: TestLoggingSettings | None = None,
) -> None:
    """Run the standard configuration pass on a fresh project.

    Creates targets for the requested presets (all catalog presets when
    none are given), links the native source-set hierarchy and applies
    the Android settings. Library modules additionally get explicit API
    mode and verbose test logging; test-only modules do not.

    Args:
        project: Project to configure; must not have been configured yet.
        *preset_names: Names of the presets to create targets for.
        is_test_module: True for a module that only holds tests.
        android: Android settings (defaults when None).
        tests: Test logging settings (defaults when None).

    Raises:
        UnknownPresetError: If a preset name is not in the catalog.
        DuplicateNodeError: If the project was already configured.
        UnknownTargetFamilyError: If a native target cannot be classified.
    """
    presets = resolve_presets(preset_names or None)
    logger.info(
        "Configuring %s with %d presets%s",
        project.name,
        len(presets),
        " (test module)" if is_test_module else "",
    )

    project.build_all_targets(presets)
    project.apply_android_settings(android or AndroidSettings())

    if not is_test_module:
        project.explicit_api = True
        project.configure_tests(tests or TestLoggingSettings())
