# SPDX-License-Identifier: MIT
"""Source sets and the container that owns them.

A SourceSet is a named bundle of source directories that inherits
declarations from the source sets it depends on. The container keeps
names unique and the depends-on relation acyclic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from srcsets.core.errors import (
    DependencyCycleError,
    DuplicateNodeError,
    UnknownSourceSetError,
)
from srcsets.util.source_location import SourceLocation, get_caller_location

logger = logging.getLogger(__name__)

COMMON_MAIN = "commonMain"
COMMON_TEST = "commonTest"


class SourceSet:
    """A named source set in the graph.

    Example:
        common = SourceSet("commonMain")
        native = SourceSet("nativeMain")
        native.depends_on(common)

    Attributes:
        name: Unique source set name.
        parents: Source sets this one depends on, in declaration order.
        src_dirs: Source directories (not interpreted by srcsets).
        opt_ins: Opt-in annotations enabled for this source set.
        defined_at: Where this source set was created in user code.
    """

    __slots__ = ("name", "parents", "src_dirs", "opt_ins", "defined_at")

    def __init__(
        self,
        name: str,
        *,
        src_dirs: list[Path | str] | None = None,
        defined_at: SourceLocation | None = None,
    ) -> None:
        self.name = name
        self.parents: list[SourceSet] = []
        self.src_dirs: list[Path] = [Path(d) for d in src_dirs or []]
        self.opt_ins: set[str] = set()
        self.defined_at = defined_at or get_caller_location()

    def depends_on(self, parent: SourceSet) -> SourceSet:
        """Declare that this source set inherits from parent (fluent API).

        Repeating an existing edge is a no-op.

        Raises:
            DependencyCycleError: If parent already (transitively)
                depends on this source set.
        """
        if parent in self.parents:
            return self
        path = parent._path_to(self)
        if path is not None:
            raise DependencyCycleError([self.name, *path], get_caller_location())
        self.parents.append(parent)
        return self

    def _path_to(self, other: SourceSet) -> list[str] | None:
        """Names along a depends-on path from self to other, if any."""
        if self is other:
            return [self.name]
        for parent in self.parents:
            rest = parent._path_to(other)
            if rest is not None:
                return [self.name, *rest]
        return None

    def ancestors(self) -> list[SourceSet]:
        """All source sets this one transitively depends on (DFS, no duplicates)."""
        result: list[SourceSet] = []
        seen: set[str] = set()

        def _collect(source_set: SourceSet) -> None:
            for parent in source_set.parents:
                if parent.name not in seen:
                    seen.add(parent.name)
                    result.append(parent)
                    _collect(parent)

        _collect(self)
        return result

    def opt_in(self, annotation: str) -> SourceSet:
        """Enable an opt-in annotation for this source set (fluent API)."""
        self.opt_ins.add(annotation)
        return self

    def __repr__(self) -> str:
        parents = ", ".join(p.name for p in self.parents)
        return f"SourceSet({self.name!r}, parents=[{parents}])"


class SourceSetContainer:
    """Registry of source sets keyed by unique name.

    A fresh container already holds the parentless commonMain and
    commonTest source sets every multiplatform build starts from.
    """

    def __init__(self) -> None:
        self._source_sets: dict[str, SourceSet] = {}
        self.create(COMMON_MAIN)
        self.create(COMMON_TEST)

    def create(self, name: str) -> SourceSet:
        """Create a new source set.

        Raises:
            DuplicateNodeError: If the name is already taken.
        """
        if name in self._source_sets:
            raise DuplicateNodeError(name, get_caller_location())
        source_set = SourceSet(name, defined_at=get_caller_location())
        self._source_sets[name] = source_set
        logger.debug("Created source set %s", name)
        return source_set

    def get(self, name: str) -> SourceSet:
        """Get an existing source set.

        Raises:
            UnknownSourceSetError: If no source set has this name.
        """
        source_set = self._source_sets.get(name)
        if source_set is None:
            raise UnknownSourceSetError(name, get_caller_location())
        return source_set

    def find(self, name: str) -> SourceSet | None:
        return self._source_sets.get(name)

    def get_or_create(self, name: str) -> SourceSet:
        if name in self._source_sets:
            return self._source_sets[name]
        return self.create(name)

    def depends_on(self, child: str, parent: str) -> None:
        """Declare a child -> parent edge between two existing source sets."""
        self.get(child).depends_on(self.get(parent))

    def names(self) -> list[str]:
        return list(self._source_sets)

    def __contains__(self, name: object) -> bool:
        return name in self._source_sets

    def __iter__(self) -> Iterator[SourceSet]:
        return iter(list(self._source_sets.values()))

    def __len__(self) -> int:
        return len(self._source_sets)
