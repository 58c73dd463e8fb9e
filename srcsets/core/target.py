# SPDX-License-Identifier: MIT
"""Platform targets and their compilations.

A Target is one compilation target of a multiplatform build (Android,
a JS flavour, the JVM, or one native OS/CPU combination). Each target
owns a "main" and a "test" compilation whose default source sets are
named after the target.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Literal

from srcsets.core.errors import DuplicateNodeError
from srcsets.util.source_location import SourceLocation, get_caller_location

if TYPE_CHECKING:
    from srcsets.core.source_set import SourceSet, SourceSetContainer

# Valid target kinds
TargetKind = Literal[
    "android",
    "js",  # Legacy JS backend
    "js_ir",  # IR JS backend
    "jvm",
    "jvm_with_java",  # JVM target built by the java plugin
    "native",
]

JS_KINDS = frozenset({"js", "js_ir"})

MAIN = "main"
TEST = "test"


class Family(Enum):
    """OS family of a native platform."""

    OSX = "osx"
    IOS = "ios"
    TVOS = "tvos"
    WATCHOS = "watchos"
    LINUX = "linux"
    MINGW = "mingw"
    ANDROID = "android"
    WASM = "wasm"
    ZEPHYR = "zephyr"

    @property
    def is_apple_family(self) -> bool:
        return self in _APPLE_FAMILIES


_APPLE_FAMILIES = frozenset({Family.OSX, Family.IOS, Family.TVOS, Family.WATCHOS})


class Architecture(Enum):
    """CPU architecture of a native platform, with its pointer width."""

    X64 = ("x64", 64)
    X86 = ("x86", 32)
    ARM64 = ("arm64", 64)
    ARM32 = ("arm32", 32)
    MIPS32 = ("mips32", 32)
    MIPSEL32 = ("mipsel32", 32)
    WASM32 = ("wasm32", 32)

    def __init__(self, label: str, bitness: int) -> None:
        self.label = label
        self.bitness = bitness


@dataclass(frozen=True)
class NativePlatform:
    """An OS + CPU combination a native target compiles for.

    Either field may be None when the platform description is
    incomplete; the hierarchy linker refuses to classify such targets.
    """

    name: str
    family: Family | None
    architecture: Architecture | None

    @property
    def bitness(self) -> int | None:
        if self.architecture is None:
            return None
        return self.architecture.bitness


class Compilation:
    """One compilation of a target (main or test).

    Attributes:
        name: Compilation name ("main" or "test").
        target: Owning target.
        default_source_set: Source set holding this compilation's own sources.
        all_warnings_as_errors: Whether compiler warnings fail the build.
    """

    __slots__ = ("name", "target", "default_source_set", "all_warnings_as_errors")

    def __init__(self, name: str, target: Target, default_source_set: SourceSet) -> None:
        self.name = name
        self.target = target
        self.default_source_set = default_source_set
        self.all_warnings_as_errors = False

    def __repr__(self) -> str:
        return f"Compilation({self.target.name}/{self.name})"


class Target:
    """A named compilation target.

    Creating a target registers its default source sets
    (``<name>Main`` and ``<name>Test``) in the given container. Both
    names must be free, so a target called "common" is rejected with
    DuplicateNodeError instead of sharing commonMain.

    Example:
        source_sets = SourceSetContainer()
        ios = Target(
            "iosArm64",
            "native",
            source_sets,
            platform=NativePlatform("ios_arm64", Family.IOS, Architecture.ARM64),
        )
        ios.compilations["main"].default_source_set  # iosArm64Main

    Attributes:
        name: Target name.
        kind: Target kind.
        platform: Native platform, for native targets only.
        preset: Name of the preset the target was created from.
        compilations: Compilations keyed by name.
        options: Kind-specific settings (e.g. "browser" for JS).
        defined_at: Where this target was created in user code.
    """

    __slots__ = (
        "name",
        "kind",
        "platform",
        "preset",
        "compilations",
        "options",
        "defined_at",
    )

    def __init__(
        self,
        name: str,
        kind: TargetKind,
        source_sets: SourceSetContainer,
        *,
        platform: NativePlatform | None = None,
        preset: str | None = None,
        defined_at: SourceLocation | None = None,
    ) -> None:
        self.name = name
        self.kind: TargetKind = kind
        self.platform = platform
        self.preset = preset
        self.options: dict[str, Any] = {}
        self.defined_at = defined_at or get_caller_location()
        default_names = {MAIN: f"{name}Main", TEST: f"{name}Test"}
        for source_set_name in default_names.values():
            if source_set_name in source_sets:
                raise DuplicateNodeError(source_set_name, self.defined_at)
        self.compilations: dict[str, Compilation] = {
            compilation: Compilation(compilation, self, source_sets.create(source_set_name))
            for compilation, source_set_name in default_names.items()
        }

    @property
    def is_native(self) -> bool:
        return self.kind == "native"

    @property
    def is_js(self) -> bool:
        return self.kind in JS_KINDS

    def compilation(self, name: str) -> Compilation:
        return self.compilations[name]

    def __repr__(self) -> str:
        platform = f", {self.platform.name}" if self.platform else ""
        return f"Target({self.name!r}, {self.kind}{platform})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Target):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


class TargetContainer:
    """Registry of targets in creation order."""

    def __init__(self) -> None:
        self._targets: dict[str, Target] = {}

    def add(self, target: Target) -> Target:
        """Register a target.

        Raises:
            ValueError: If a target with the same name already exists.
        """
        if target.name in self._targets:
            raise ValueError(f"Target '{target.name}' already exists")
        self._targets[target.name] = target
        return target

    def find_by_name(self, name: str) -> Target | None:
        return self._targets.get(name)

    def native(self) -> list[Target]:
        """All native targets."""
        return [t for t in self._targets.values() if t.is_native]

    def any_js(self) -> bool:
        return any(t.is_js for t in self._targets.values())

    def __contains__(self, name: object) -> bool:
        return name in self._targets

    def __iter__(self) -> Iterator[Target]:
        return iter(list(self._targets.values()))

    def __len__(self) -> int:
        return len(self._targets)
