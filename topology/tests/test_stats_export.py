"""Tests for topology.stats and topology.export."""

import csv
import json

import pytest

from geometry.primitives import create_open_cylinder, create_square, create_tetrahedron
from topology import HalfEdgeTriangleMesh, build_half_edge_mesh
from topology.export import write_summary_csv, write_summary_json
from topology.stats import inventory, summarize, valence


class TestInventory:
    def test_tetrahedron(self):
        inv = inventory(build_half_edge_mesh(create_tetrahedron()))
        assert inv["n_half_edges"] == 12
        assert inv["n_edges"] == 6
        assert inv["n_boundaries"] == 0
        assert inv["euler_characteristic"] == 2
        assert inv["is_closed"]

    def test_cylinder(self):
        inv = inventory(build_half_edge_mesh(create_open_cylinder(resolution=6)))
        assert inv["n_boundaries"] == 2
        assert inv["boundary_lengths"] == [6, 6]
        assert inv["n_boundary_half_edges"] == 12
        assert inv["euler_characteristic"] == 0
        assert not inv["is_closed"]

    def test_empty(self):
        inv = inventory(HalfEdgeTriangleMesh())
        assert inv["n_half_edges"] == 0
        assert not inv["is_closed"]


class TestValence:
    def test_square(self):
        val = valence(build_half_edge_mesh(create_square()))
        assert val["min"] == 1
        assert val["max"] == 2
        assert val["hist"] == {1: 2, 2: 2}

    def test_empty(self):
        assert valence(HalfEdgeTriangleMesh())["hist"] == {}


class TestExport:
    @pytest.fixture
    def summary(self):
        return summarize(build_half_edge_mesh(create_open_cylinder(resolution=4)))

    def test_json(self, summary, tmp_path):
        path = write_summary_json(summary, str(tmp_path / "sub" / "topo.json"))
        data = json.loads(open(path, encoding="utf-8").read())
        assert data["inventory"]["n_boundaries"] == 2
        assert data["valence"]["hist"] == {"3": 8}

    def test_csv(self, summary, tmp_path):
        path = write_summary_csv(summary, str(tmp_path / "topo.csv"))
        with open(path, newline="", encoding="utf-8") as f:
            rows = dict((r[0], r[1]) for r in csv.reader(f))
        assert rows["key"] == "value"
        assert rows["inventory.n_boundaries"] == "2"
        assert json.loads(rows["inventory.boundary_lengths"]) == [4, 4]
        assert rows["valence.hist.3"] == "8"
