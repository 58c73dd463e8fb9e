# SPDX-License-Identifier: MIT
"""Output generators for configured projects."""

from srcsets.generators.generator import BaseGenerator, Generator
from srcsets.generators.json_report import JsonGenerator
from srcsets.generators.mermaid import MermaidGenerator

__all__ = [
    "BaseGenerator",
    "Generator",
    "JsonGenerator",
    "MermaidGenerator",
]
