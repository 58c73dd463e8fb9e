# SPDX-License-Identifier: MIT
"""Generator protocol for project output.

Generators take a configured Project and describe it in some format
(a JSON report, a Mermaid diagram, ...).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from srcsets.core.project import Project


@runtime_checkable
class Generator(Protocol):
    """Protocol for output generators."""

    @property
    def name(self) -> str:
        """Generator name (e.g., 'json', 'mermaid')."""
        ...

    def render(self, project: Project) -> str:
        """Return the generated text for a project."""
        ...

    def generate(self, project: Project, output_dir: Path) -> Path:
        """Write the generated text into output_dir and return the file path."""
        ...


class BaseGenerator:
    """Base class for generators writing a single output file."""

    def __init__(self, name: str, output_filename: str) -> None:
        self._name = name
        self._output_filename = output_filename

    @property
    def name(self) -> str:
        return self._name

    def render(self, project: Project) -> str:
        """Render project output. Subclasses must implement."""
        raise NotImplementedError

    def generate(self, project: Project, output_dir: Path) -> Path:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / self._output_filename
        with open(output_file, "w") as f:
            f.write(self.render(project))
        return output_file

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
