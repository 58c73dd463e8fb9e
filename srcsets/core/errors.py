# SPDX-License-Identifier: MIT
"""Custom exceptions for srcsets.

All srcsets exceptions inherit from SrcsetsError, which includes
optional source location information for better error messages.
Every one of them is fatal to the configuration pass: there is no
retry and no partial result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from srcsets.util.source_location import SourceLocation


class SrcsetsError(Exception):
    """Base class for all srcsets exceptions.

    Attributes:
        message: The error message.
        location: Optional source location where the error occurred.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class ConfigureError(SrcsetsError):
    """Error during the configuration pass.

    Raised when stored settings are invalid or a collaborator
    is missing something the pass needs.
    """


class DuplicateNodeError(ConfigureError):
    """A source set with the same name already exists.

    Attributes:
        name: The colliding source set name.
    """

    def __init__(
        self,
        name: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.name = name
        super().__init__(f"source set already exists: {name}", location)


class UnknownSourceSetError(ConfigureError):
    """Referenced source set does not exist.

    Attributes:
        name: The missing source set name.
    """

    def __init__(
        self,
        name: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.name = name
        super().__init__(f"unknown source set: {name}", location)


class UnknownTargetFamilyError(ConfigureError):
    """A platform target cannot be classified into the native hierarchy.

    Attributes:
        target: Name of the target.
        reason: What was missing.
    """

    def __init__(
        self,
        target: str,
        reason: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"cannot classify target {target}: {reason}", location)


class UnknownPresetError(ConfigureError):
    """Requested target preset is not in the catalog.

    Attributes:
        preset: The unknown preset name.
    """

    def __init__(
        self,
        preset: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.preset = preset
        super().__init__(f"unknown target preset: {preset}", location)


class DependencyCycleError(ConfigureError):
    """A depends-on edge would make the source-set graph cyclic.

    Attributes:
        cycle: The source set names forming the cycle.
    """

    def __init__(
        self,
        cycle: list[str],
        location: SourceLocation | None = None,
    ) -> None:
        self.cycle = cycle
        cycle_str = " -> ".join(cycle)
        super().__init__(f"source set cycle: {cycle_str}", location)
