# SPDX-License-Identifier: MIT
"""Mermaid diagram generator for the source-set graph.

Generates Mermaid flowchart syntax showing which source sets inherit
from which. Output can be rendered in GitHub markdown, documentation
tools, or the Mermaid live editor (https://mermaid.live).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from srcsets.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from srcsets.core.project import Project
    from srcsets.core.source_set import SourceSet

Side = Literal["main", "test", "both"]


class MermaidGenerator(BaseGenerator):
    """Generator that produces Mermaid flowchart diagrams.

    Edges point from parent to child, so inheritance reads downwards.

    Example output:
        ```mermaid
        flowchart TB
          commonMain[commonMain]
          nativeMain[nativeMain]
          linuxX64Main([linuxX64Main])
          commonMain --> nativeMain
          nativeMain --> linuxX64Main
        ```

    Usage:
        generator = MermaidGenerator(side="main")
        generator.generate(project, Path("build"))
        # Creates build/sourcesets.mmd
    """

    def __init__(
        self,
        *,
        side: Side = "both",
        direction: str = "TB",
        output_filename: str = "sourcesets.mmd",
    ) -> None:
        """Initialize the Mermaid generator.

        Args:
            side: Which compilations to show: "main", "test" or "both".
            direction: Graph direction - "LR" (left-right), "TB" (top-bottom),
                      "RL" (right-left), or "BT" (bottom-top).
            output_filename: Name of the output file.
        """
        super().__init__("mermaid", output_filename)
        self._side = side
        self._direction = direction

    def render(self, project: Project) -> str:
        default_source_sets = {
            compilation.default_source_set.name
            for target in project.targets
            for compilation in target.compilations.values()
        }
        source_sets = [s for s in project.source_sets if self._include(s)]

        lines = [
            "---",
            f"title: {project.name} Source Sets",
            "---",
            f"flowchart {self._direction}",
        ]
        for source_set in source_sets:
            node_id = self._sanitize_id(source_set.name)
            # Rounded for target-owned source sets, rectangle for shared ones
            if source_set.name in default_source_sets:
                lines.append(f"  {node_id}([{source_set.name}])")
            else:
                lines.append(f"  {node_id}[{source_set.name}]")

        lines.append("")
        for source_set in source_sets:
            child_id = self._sanitize_id(source_set.name)
            for parent in source_set.parents:
                lines.append(f"  {self._sanitize_id(parent.name)} --> {child_id}")
        return "\n".join(lines) + "\n"

    def _include(self, source_set: SourceSet) -> bool:
        if self._side == "main":
            return source_set.name.endswith("Main")
        if self._side == "test":
            return source_set.name.endswith("Test")
        return True

    def _sanitize_id(self, name: str) -> str:
        """Sanitize a name for use as a Mermaid node ID."""
        result = name.replace("/", "_").replace(".", "_").replace("-", "_")
        result = result.replace(" ", "_").replace(":", "_")
        # Ensure it starts with a letter
        if result and result[0].isdigit():
            result = "n" + result
        # "end" is reserved in flowcharts
        if result == "end":
            result = "end_"
        return result
