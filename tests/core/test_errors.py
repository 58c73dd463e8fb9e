# SPDX-License-Identifier: MIT
"""Tests for srcsets.core.errors."""

from srcsets.core.errors import (
    ConfigureError,
    DependencyCycleError,
    DuplicateNodeError,
    SrcsetsError,
    UnknownTargetFamilyError,
)
from srcsets.util.source_location import SourceLocation


class TestErrors:
    def test_message_without_location(self):
        err = DuplicateNodeError("nativeMain")
        assert str(err) == "source set already exists: nativeMain"
        assert err.name == "nativeMain"

    def test_message_with_location(self):
        loc = SourceLocation("build.py", 12)
        err = DuplicateNodeError("nativeMain", loc)
        assert str(err) == "build.py:12: source set already exists: nativeMain"

    def test_hierarchy(self):
        assert issubclass(DuplicateNodeError, ConfigureError)
        assert issubclass(UnknownTargetFamilyError, ConfigureError)
        assert issubclass(ConfigureError, SrcsetsError)

    def test_unknown_family_fields(self):
        err = UnknownTargetFamilyError("fooX64", "OS family unknown")
        assert err.target == "fooX64"
        assert "fooX64" in str(err)
        assert "OS family unknown" in str(err)

    def test_cycle_message(self):
        err = DependencyCycleError(["a", "b", "a"])
        assert err.cycle == ["a", "b", "a"]
        assert "a -> b -> a" in str(err)
