# SPDX-License-Identifier: MIT
"""Tests for srcsets.core.target."""

import pytest

from srcsets.core.errors import DuplicateNodeError
from srcsets.core.source_set import SourceSetContainer
from srcsets.core.target import (
    Architecture,
    Family,
    NativePlatform,
    Target,
    TargetContainer,
)


class TestFamily:
    @pytest.mark.parametrize(
        "family", [Family.OSX, Family.IOS, Family.TVOS, Family.WATCHOS]
    )
    def test_apple_families(self, family):
        assert family.is_apple_family

    @pytest.mark.parametrize(
        "family",
        [Family.LINUX, Family.MINGW, Family.ANDROID, Family.WASM, Family.ZEPHYR],
    )
    def test_non_apple_families(self, family):
        assert not family.is_apple_family


class TestArchitecture:
    def test_bitness(self):
        assert Architecture.X64.bitness == 64
        assert Architecture.ARM64.bitness == 64
        assert Architecture.ARM32.bitness == 32
        assert Architecture.X86.bitness == 32

    def test_label(self):
        assert Architecture.ARM64.label == "arm64"


class TestNativePlatform:
    def test_bitness_from_architecture(self):
        platform = NativePlatform("ios_arm64", Family.IOS, Architecture.ARM64)
        assert platform.bitness == 64

    def test_bitness_unknown(self):
        platform = NativePlatform("mystery", Family.IOS, None)
        assert platform.bitness is None


class TestTarget:
    def test_creates_default_source_sets(self):
        source_sets = SourceSetContainer()
        target = Target("linuxX64", "native", source_sets)

        main = target.compilation("main").default_source_set
        test = target.compilation("test").default_source_set
        assert main is source_sets.get("linuxX64Main")
        assert test is source_sets.get("linuxX64Test")

    def test_existing_source_set_name_rejected(self):
        source_sets = SourceSetContainer()
        source_sets.create("jvmTest")
        with pytest.raises(DuplicateNodeError) as exc_info:
            Target("jvm", "jvm", source_sets)
        assert exc_info.value.name == "jvmTest"
        # Nothing half-registered
        assert "jvmMain" not in source_sets

    def test_common_name_does_not_share_common_main(self):
        source_sets = SourceSetContainer()
        with pytest.raises(DuplicateNodeError) as exc_info:
            Target("common", "native", source_sets)
        assert exc_info.value.name == "commonMain"
        assert source_sets.names() == ["commonMain", "commonTest"]

    def test_compilation_defaults(self):
        target = Target("jvm", "jvm", SourceSetContainer())
        compilation = target.compilation("main")
        assert compilation.target is target
        assert compilation.all_warnings_as_errors is False

    def test_kind_predicates(self):
        source_sets = SourceSetContainer()
        assert Target("linuxX64", "native", source_sets).is_native
        assert Target("js", "js", source_sets).is_js
        assert Target("jsIr", "js_ir", source_sets).is_js
        assert not Target("jvm", "jvm", source_sets).is_js

    def test_tracks_source_location(self):
        target = Target("jvm", "jvm", SourceSetContainer())
        assert target.defined_at is not None
        assert target.defined_at.lineno > 0

    def test_equality_by_name(self):
        assert Target("jvm", "jvm", SourceSetContainer()) == Target(
            "jvm", "jvm", SourceSetContainer()
        )
        targets = {
            Target("jvm", "jvm", SourceSetContainer()),
            Target("jvm", "jvm", SourceSetContainer()),
        }
        assert len(targets) == 1


class TestTargetContainer:
    def test_add_and_find(self):
        container = TargetContainer()
        target = container.add(Target("jvm", "jvm", SourceSetContainer()))
        assert container.find_by_name("jvm") is target
        assert container.find_by_name("js") is None
        assert "jvm" in container

    def test_add_duplicate_raises(self):
        source_sets = SourceSetContainer()
        container = TargetContainer()
        container.add(Target("jvm", "jvm", source_sets))
        with pytest.raises(ValueError):
            container.add(Target("jvm", "jvm", SourceSetContainer()))

    def test_native_filter(self):
        source_sets = SourceSetContainer()
        container = TargetContainer()
        container.add(Target("jvm", "jvm", source_sets))
        linux = container.add(Target("linuxX64", "native", source_sets))
        assert container.native() == [linux]

    def test_any_js(self):
        source_sets = SourceSetContainer()
        container = TargetContainer()
        container.add(Target("jvm", "jvm", source_sets))
        assert not container.any_js()
        container.add(Target("jsIr", "js_ir", source_sets))
        assert container.any_js()
