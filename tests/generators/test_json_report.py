# SPDX-License-Identifier: MIT
"""Tests for JsonGenerator."""

import json

from srcsets.core.presets import resolve_presets
from srcsets.core.project import Project
from srcsets.generators import Generator, JsonGenerator


class TestJsonGenerator:
    def test_is_generator(self):
        gen = JsonGenerator()
        assert isinstance(gen, Generator)
        assert gen.name == "json"
        assert repr(gen) == "JsonGenerator('json')"

    def test_render_matches_to_dict(self):
        project = Project("settings")
        project.build_all_targets(resolve_presets(["macosX64"]))
        data = json.loads(JsonGenerator().render(project))
        assert data == project.to_dict()
        assert data["source_sets"]["macosX64Test"] == ["apple64Test"]

    def test_generate_writes_file(self, tmp_path):
        path = JsonGenerator(output_filename="graph.json").generate(
            Project("settings"), tmp_path
        )
        assert path == tmp_path / "graph.json"
        assert json.loads(path.read_text())["name"] == "settings"
