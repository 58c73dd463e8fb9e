# SPDX-License-Identifier: MIT
"""Tests for srcsets.core.source_set."""

from pathlib import Path

import pytest

from srcsets.core.errors import (
    DependencyCycleError,
    DuplicateNodeError,
    UnknownSourceSetError,
)
from srcsets.core.source_set import SourceSet, SourceSetContainer


class TestSourceSet:
    def test_creation(self):
        source_set = SourceSet("commonMain", src_dirs=["src/commonMain/kotlin"])
        assert source_set.name == "commonMain"
        assert source_set.parents == []
        assert source_set.src_dirs == [Path("src/commonMain/kotlin")]
        assert source_set.opt_ins == set()

    def test_tracks_source_location(self):
        source_set = SourceSet("commonMain")
        assert source_set.defined_at is not None
        assert source_set.defined_at.lineno > 0

    def test_depends_on(self):
        common = SourceSet("commonMain")
        native = SourceSet("nativeMain")
        assert native.depends_on(common) is native
        assert native.parents == [common]

    def test_depends_on_avoids_duplicates(self):
        common = SourceSet("commonMain")
        native = SourceSet("nativeMain")
        native.depends_on(common)
        native.depends_on(common)
        assert native.parents == [common]

    def test_fan_in(self):
        apple = SourceSet("appleMain")
        apple64 = SourceSet("apple64Main").depends_on(apple)
        apple32 = SourceSet("apple32Main").depends_on(apple)
        assert apple64.parents == [apple]
        assert apple32.parents == [apple]

    def test_self_edge_is_cycle(self):
        common = SourceSet("commonMain")
        with pytest.raises(DependencyCycleError):
            common.depends_on(common)

    def test_cycle_detected(self):
        a = SourceSet("a")
        b = SourceSet("b").depends_on(a)
        c = SourceSet("c").depends_on(b)
        with pytest.raises(DependencyCycleError) as exc_info:
            a.depends_on(c)
        assert exc_info.value.cycle == ["a", "c", "b", "a"]
        assert a.parents == []

    def test_ancestors(self):
        common = SourceSet("commonMain")
        native = SourceSet("nativeMain").depends_on(common)
        apple = SourceSet("appleMain").depends_on(native)
        assert apple.ancestors() == [native, common]

    def test_opt_in(self):
        source_set = SourceSet("commonMain").opt_in("kotlin.RequiresOptIn")
        assert source_set.opt_ins == {"kotlin.RequiresOptIn"}


class TestSourceSetContainer:
    def test_starts_with_common_source_sets(self):
        container = SourceSetContainer()
        assert container.names() == ["commonMain", "commonTest"]
        assert container.get("commonMain").parents == []
        assert container.get("commonTest").parents == []

    def test_create_and_get(self):
        container = SourceSetContainer()
        native = container.create("nativeMain")
        assert container.get("nativeMain") is native
        assert "nativeMain" in container
        assert len(container) == 3

    def test_create_duplicate_raises(self):
        container = SourceSetContainer()
        container.create("nativeMain")
        with pytest.raises(DuplicateNodeError) as exc_info:
            container.create("nativeMain")
        assert exc_info.value.name == "nativeMain"

    def test_get_unknown_raises(self):
        container = SourceSetContainer()
        with pytest.raises(UnknownSourceSetError):
            container.get("nativeMain")

    def test_find_returns_none(self):
        assert SourceSetContainer().find("nativeMain") is None

    def test_get_or_create(self):
        container = SourceSetContainer()
        first = container.get_or_create("linuxX64Main")
        second = container.get_or_create("linuxX64Main")
        assert first is second

    def test_depends_on_by_name(self):
        container = SourceSetContainer()
        container.create("nativeMain")
        container.depends_on("nativeMain", "commonMain")
        assert container.get("nativeMain").parents == [container.get("commonMain")]

    def test_iteration_in_creation_order(self):
        container = SourceSetContainer()
        container.create("nativeMain")
        container.create("appleMain")
        assert [s.name for s in container] == [
            "commonMain",
            "commonTest",
            "nativeMain",
            "appleMain",
        ]
