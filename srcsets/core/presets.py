# SPDX-License-Identifier: MIT
"""Catalog of target presets.

A preset is a template for creating one target: it fixes the target
kind and, for native presets, the OS/CPU platform.
"""

from __future__ import annotations

from dataclasses import dataclass

from srcsets.core.errors import UnknownPresetError
from srcsets.core.target import (
    JS_KINDS,
    Architecture,
    Family,
    NativePlatform,
    TargetKind,
)
from srcsets.util.source_location import get_caller_location


@dataclass(frozen=True)
class TargetPreset:
    """Template describing how to create a target for one platform.

    Attributes:
        name: Preset name; targets created from it share this name.
        kind: Kind of target the preset creates.
        platform: Native platform for native presets, else None.
    """

    name: str
    kind: TargetKind
    platform: NativePlatform | None = None

    @property
    def is_js(self) -> bool:
        return self.kind in JS_KINDS

    def describe(self) -> str:
        if self.platform is None:
            return self.kind
        return f"{self.kind} ({self.platform.name})"


def _native(name: str, platform: str, family: Family, arch: Architecture) -> TargetPreset:
    return TargetPreset(name, "native", NativePlatform(platform, family, arch))


PRESETS: dict[str, TargetPreset] = {
    p.name: p
    for p in [
        TargetPreset("android", "android"),
        TargetPreset("js", "js"),
        TargetPreset("jsIr", "js_ir"),
        TargetPreset("jvm", "jvm"),
        TargetPreset("jvmWithJava", "jvm_with_java"),
        _native("androidNativeArm32", "android_arm32", Family.ANDROID, Architecture.ARM32),
        _native("androidNativeArm64", "android_arm64", Family.ANDROID, Architecture.ARM64),
        _native("androidNativeX86", "android_x86", Family.ANDROID, Architecture.X86),
        _native("androidNativeX64", "android_x64", Family.ANDROID, Architecture.X64),
        _native("iosArm32", "ios_arm32", Family.IOS, Architecture.ARM32),
        _native("iosArm64", "ios_arm64", Family.IOS, Architecture.ARM64),
        _native("iosX64", "ios_x64", Family.IOS, Architecture.X64),
        _native("linuxArm32Hfp", "linux_arm32_hfp", Family.LINUX, Architecture.ARM32),
        _native("linuxArm64", "linux_arm64", Family.LINUX, Architecture.ARM64),
        _native("linuxMips32", "linux_mips32", Family.LINUX, Architecture.MIPS32),
        _native("linuxMipsel32", "linux_mipsel32", Family.LINUX, Architecture.MIPSEL32),
        _native("linuxX64", "linux_x64", Family.LINUX, Architecture.X64),
        _native("macosX64", "macos_x64", Family.OSX, Architecture.X64),
        _native("mingwX64", "mingw_x64", Family.MINGW, Architecture.X64),
        _native("mingwX86", "mingw_x86", Family.MINGW, Architecture.X86),
        _native("tvosArm64", "tvos_arm64", Family.TVOS, Architecture.ARM64),
        _native("tvosX64", "tvos_x64", Family.TVOS, Architecture.X64),
        _native("wasm32", "wasm32", Family.WASM, Architecture.WASM32),
        _native("watchosArm32", "watchos_arm32", Family.WATCHOS, Architecture.ARM32),
        _native("watchosArm64", "watchos_arm64", Family.WATCHOS, Architecture.ARM64),
        _native("watchosX86", "watchos_x86", Family.WATCHOS, Architecture.X86),
        _native("watchosX64", "watchos_x64", Family.WATCHOS, Architecture.X64),
        _native("zephyrStm32f4Disco", "zephyr_stm32f4_disco", Family.ZEPHYR, Architecture.ARM32),
    ]
}


def get_preset(name: str) -> TargetPreset:
    """Look up a preset by name.

    Raises:
        UnknownPresetError: If the catalog has no such preset.
    """
    preset = PRESETS.get(name)
    if preset is None:
        raise UnknownPresetError(name, get_caller_location())
    return preset


def resolve_presets(names: list[str] | tuple[str, ...] | None = None) -> list[TargetPreset]:
    """Resolve preset names in catalog order; None means every preset.

    Duplicate names collapse to one preset.
    """
    if names is None:
        return list(PRESETS.values())
    for name in names:
        get_preset(name)
    wanted = set(names)
    return [p for p in PRESETS.values() if p.name in wanted]
