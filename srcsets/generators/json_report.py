# SPDX-License-Identifier: MIT
"""JSON report of a configured project."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from srcsets.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from srcsets.core.project import Project


class JsonGenerator(BaseGenerator):
    """Writes Project.to_dict() as indented JSON (srcsets.json by default)."""

    def __init__(self, *, output_filename: str = "srcsets.json") -> None:
        super().__init__("json", output_filename)

    def render(self, project: Project) -> str:
        return json.dumps(project.to_dict(), indent=2) + "\n"
