# SPDX-License-Identifier: MIT
"""Project container for srcsets.

The Project is the top-level container for one configuration pass: it
owns the source sets, the targets created from presets, the test tasks
and the module-wide settings the pass applies.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from srcsets.core.linker import SourceSetGraphLinker
from srcsets.core.source_set import SourceSetContainer
from srcsets.core.target import Target, TargetContainer
from srcsets.util.source_location import SourceLocation, get_caller_location

if TYPE_CHECKING:
    from srcsets.configure.config import AndroidSettings, TestLoggingSettings
    from srcsets.core.presets import TargetPreset

logger = logging.getLogger(__name__)

REQUIRES_OPT_IN = "kotlin.RequiresOptIn"


@dataclass
class TestTask:
    """The test task of one target.

    Attributes:
        name: Task name.
        target: Name of the target under test.
        logging: Logging settings, None until configured.
    """

    __test__ = False  # not a pytest test class

    name: str
    target: str
    logging: TestLoggingSettings | None = None


class Project:
    """Top-level container for a configuration pass.

    Example:
        project = Project("settings")
        project.build_all_targets(resolve_presets(["iosArm64", "linuxX64"]))
        project.source_sets.get("iosArm64Main").parents  # [apple64Main]

    Attributes:
        name: Project name.
        source_sets: All source sets, starting with commonMain/commonTest.
        targets: All targets.
        test_tasks: Test tasks keyed by task name.
        android: Android settings, None until applied.
        explicit_api: Whether explicit API mode is enabled.
        ide_active: Whether the pass runs inside an IDE session.
        defined_at: Where the project was created in user code.
    """

    __slots__ = (
        "name",
        "source_sets",
        "targets",
        "test_tasks",
        "android",
        "explicit_api",
        "ide_active",
        "defined_at",
    )

    def __init__(
        self,
        name: str,
        *,
        ide_active: bool = False,
        defined_at: SourceLocation | None = None,
    ) -> None:
        self.name = name
        self.source_sets = SourceSetContainer()
        self.targets = TargetContainer()
        self.test_tasks: dict[str, TestTask] = {}
        self.android: AndroidSettings | None = None
        self.explicit_api = False
        self.ide_active = ide_active
        self.defined_at = defined_at or get_caller_location()

    def add_target(self, target: Target) -> Target:
        """Register a target and create its test task.

        Raises:
            ValueError: If a target with the same name already exists.
        """
        self.targets.add(target)
        task = TestTask(f"{target.name}Test", target.name)
        self.test_tasks[task.name] = task
        return target

    def target_from_preset(self, preset: TargetPreset) -> Target:
        """Create a target named after the preset, with no extra setup."""
        target = Target(
            preset.name,
            preset.kind,
            self.source_sets,
            platform=preset.platform,
            preset=preset.name,
            defined_at=get_caller_location(),
        )
        logger.debug("Created target %s from preset", target.name)
        return self.add_target(target)

    def build_all_targets(self, presets: list[TargetPreset]) -> None:
        """Create targets for the requested presets and link the native hierarchy.

        Android and JS get their specific setup first. Every other preset
        gets a plain target, except that JVM-with-Java presets are skipped
        (they conflict with the Android plugin) and a JS preset is skipped
        once any JS target exists.
        """
        self._configure_android(presets)
        self._configure_js(presets)

        for preset in presets:
            if preset.kind == "jvm_with_java":
                logger.info("Skipping preset %s: not supported with Android", preset.name)
                continue
            if preset.is_js and self.targets.any_js():
                logger.debug("Skipping repeat JS preset %s", preset.name)
                continue
            if preset.name not in self.targets:
                self.target_from_preset(preset)

        linker = SourceSetGraphLinker(self.source_sets, self.targets)
        linker.build_hierarchy()
        linker.link_all()

        for source_set in self.source_sets:
            source_set.opt_in(REQUIRES_OPT_IN)
        for target in self.targets:
            for compilation in target.compilations.values():
                compilation.all_warnings_as_errors = True

    def _configure_android(self, presets: list[TargetPreset]) -> None:
        preset = next((p for p in presets if p.kind == "android"), None)
        if preset is None or preset.name in self.targets:
            return
        target = self.target_from_preset(preset)
        target.options["publish_all_library_variants"] = True

    def _configure_js(self, presets: list[TargetPreset]) -> None:
        preset = next((p for p in presets if p.is_js), None)
        if preset is None or self.targets.any_js():
            return
        target = self.target_from_preset(preset)
        target.options["browser"] = True

    def apply_android_settings(self, settings: AndroidSettings) -> None:
        settings.validate()
        self.android = settings

    def configure_tests(self, settings: TestLoggingSettings) -> None:
        """Apply the same logging settings to every test task."""
        for task in self.test_tasks.values():
            task.logging = settings

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable description of the configured project."""
        targets = []
        for target in self.targets:
            entry: dict[str, Any] = {"name": target.name, "kind": target.kind}
            if target.platform is not None:
                entry["family"] = (
                    target.platform.family.value if target.platform.family else None
                )
                entry["bitness"] = target.platform.bitness
            if target.options:
                entry["options"] = dict(target.options)
            targets.append(entry)
        return {
            "name": self.name,
            "explicit_api": self.explicit_api,
            "ide_active": self.ide_active,
            "android": asdict(self.android) if self.android else None,
            "targets": targets,
            "source_sets": {
                s.name: [p.name for p in s.parents] for s in self.source_sets
            },
            "test_tasks": {
                name: asdict(task.logging) if task.logging else None
                for name, task in self.test_tasks.items()
            },
        }

    def __repr__(self) -> str:
        return f"Project({self.name!r}, targets={len(self.targets)})"
