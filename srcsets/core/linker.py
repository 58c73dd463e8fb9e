# SPDX-License-Identifier: MIT
"""Native source-set hierarchy.

Builds the intermediate source sets shared by native targets and
attaches every native target's default source sets to the right one:

    commonMain
      └─ nativeMain
           └─ appleMain
                ├─ apple64Main
                └─ apple32Main

The test side mirrors every edge (commonTest, nativeTest, ...).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from srcsets.core.errors import DuplicateNodeError, UnknownTargetFamilyError
from srcsets.core.source_set import COMMON_MAIN, COMMON_TEST
from srcsets.core.target import MAIN, TEST, Family
from srcsets.util.source_location import get_caller_location

if TYPE_CHECKING:
    from srcsets.core.source_set import SourceSet, SourceSetContainer
    from srcsets.core.target import Target, TargetContainer

logger = logging.getLogger(__name__)

NATIVE = "native"
APPLE = "apple"
APPLE_64 = "apple64"
APPLE_32 = "apple32"

# (node, parent) in creation order; parent None means the common root
HIERARCHY: list[tuple[str, str | None]] = [
    (NATIVE, None),
    (APPLE, NATIVE),
    (APPLE_64, APPLE),
    (APPLE_32, APPLE),
]

_SUFFIXES = {MAIN: "Main", TEST: "Test"}
_ROOTS = {MAIN: COMMON_MAIN, TEST: COMMON_TEST}


def source_set_name(node: str, compilation: str) -> str:
    """Name of a hierarchy node on the main or test side."""
    return f"{node}{_SUFFIXES[compilation]}"


class SourceSetGraphLinker:
    """Links native targets into the shared native hierarchy.

    Both registries are passed in; the linker never looks them up
    from the project.

    Example:
        linker = SourceSetGraphLinker(project.source_sets, project.targets)
        linker.build_hierarchy()
        linker.link_all()
    """

    def __init__(self, source_sets: SourceSetContainer, targets: TargetContainer) -> None:
        self.source_sets = source_sets
        self.targets = targets

    def build_hierarchy(self) -> None:
        """Create the intermediate native source sets on both sides.

        Nothing is created unless every name is free.

        Raises:
            DuplicateNodeError: If any of them already exists, e.g. when
                called a second time on the same container.
        """
        for compilation in (MAIN, TEST):
            for node, _ in HIERARCHY:
                name = source_set_name(node, compilation)
                if name in self.source_sets:
                    raise DuplicateNodeError(name, get_caller_location())

        for compilation in (MAIN, TEST):
            for node, parent in HIERARCHY:
                parent_name = (
                    _ROOTS[compilation]
                    if parent is None
                    else source_set_name(parent, compilation)
                )
                source_set = self.source_sets.create(source_set_name(node, compilation))
                source_set.depends_on(self.source_sets.get(parent_name))
                logger.debug("%s depends on %s", source_set.name, parent_name)

    def classify(self, target: Target) -> str:
        """Return the hierarchy node a native target belongs under.

        Raises:
            UnknownTargetFamilyError: If the target is not native or its
                platform description is incomplete.
        """
        if not target.is_native:
            raise UnknownTargetFamilyError(
                target.name, f"{target.kind} target is not native", get_caller_location()
            )
        platform = target.platform
        if platform is None or platform.family is None:
            raise UnknownTargetFamilyError(
                target.name, "OS family unknown", get_caller_location()
            )
        if not platform.family.is_apple_family:
            return NATIVE
        # watchOS always goes to the 32-bit side, whatever its pointer width
        if platform.family is Family.WATCHOS:
            return APPLE_32
        if platform.bitness is None:
            raise UnknownTargetFamilyError(
                target.name, "architecture bit width unknown", get_caller_location()
            )
        if platform.bitness == 32:
            return APPLE_32
        return APPLE_64

    def classify_and_attach(self, target: Target) -> SourceSet:
        """Make the target's main/test source sets depend on its hierarchy node.

        Returns:
            The main-side source set the target was attached to.
        """
        node = self.classify(target)
        attached: dict[str, SourceSet] = {}
        for compilation in (MAIN, TEST):
            parent = self.source_sets.get(source_set_name(node, compilation))
            target.compilation(compilation).default_source_set.depends_on(parent)
            attached[compilation] = parent
        logger.debug("Attached %s to %s", target.name, attached[MAIN].name)
        return attached[MAIN]

    def link_all(self) -> None:
        """Attach every native target in the registry.

        Non-native targets are left alone.
        """
        for target in self.targets.native():
            self.classify_and_attach(target)
