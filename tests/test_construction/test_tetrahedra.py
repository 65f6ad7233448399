"""Tests for the shared-corner tetrahedron cluster builder."""

import numpy as np
import pytest

from solidscene import TETRAHEDRON_OFFSET_FACTOR
from solidscene.construction import build_tetrahedron_cluster, regular_tetrahedron
from solidscene.construction.tetrahedra import face_apex
from solidscene.model import Point3


class TestRegularTetrahedron:
    def test_all_edges_equal(self):
        tet = regular_tetrahedron(1.5)
        coords = tet.coords
        lengths = [
            np.linalg.norm(coords[a] - coords[b]) for a, b in tet.EDGES
        ]
        np.testing.assert_allclose(lengths, 2 * np.sqrt(2) * 1.5)

    def test_centred_on_origin(self):
        assert regular_tetrahedron(2.0).centroid == Point3(0.0, 0.0, 0.0)


class TestFaceApex:
    def test_apex_opposite_side(self):
        shared = (Point3(1, 0, 0), Point3(0, 1, 0), Point3(0, 0, 0))
        apex = face_apex(shared, Point3(0, 0, 1), 2.0)
        mid = Point3.mean(shared)
        assert apex.z == pytest.approx(-2.0 * (1.0 / np.linalg.norm([-1 / 3, -1 / 3, 1])))
        assert apex.distance_to(mid) == pytest.approx(2.0)

    def test_degenerate_face_raises(self):
        shared = (Point3(1, 0, 0), Point3(-1, 0, 0), Point3(0, 0, 0))
        with pytest.raises(ValueError):
            face_apex(shared, Point3(0, 0, 0), 1.0)


class TestBuildTetrahedronCluster:
    def test_five_tetrahedra(self, cluster):
        assert len(cluster.tetrahedra) == 5

    def test_twenty_vertex_instances_dedup_to_eight(self, cluster):
        assert len(cluster.vertex_instances) == 20
        assert len(cluster.unique_vertices()) == 8

    def test_each_derived_shares_three_vertices(self, cluster):
        central = {v.key() for v in cluster.central.vertices}
        for tet in cluster.derived:
            shared = {v.key() for v in tet.vertices} & central
            assert len(shared) == 3

    def test_shared_vertices_follow_cyclic_pattern(self, cluster):
        v = cluster.central.vertices
        for i, tet in enumerate(cluster.derived):
            assert tet.vertices[:3] == (v[i], v[(i + 1) % 4], v[(i + 2) % 4])

    @pytest.mark.parametrize("scale", [0.5, 1.0, 3.0])
    def test_apex_distance_and_side(self, scale):
        cluster = build_tetrahedron_cluster(scale)
        v = cluster.central.vertices
        for i, tet in enumerate(cluster.derived):
            mid = Point3.mean(tet.vertices[:3])
            apex = tet.vertices[3]
            opposite = v[(i + 3) % 4]
            assert apex.distance_to(mid) == pytest.approx(
                scale * TETRAHEDRON_OFFSET_FACTOR,
            )
            towards_apex = (apex - mid).to_array()
            towards_opposite = (opposite - mid).to_array()
            assert np.dot(towards_apex, towards_opposite) < 0

    def test_offset_factor_override(self):
        cluster = build_tetrahedron_cluster(1.0, offset_factor=2.0)
        tet = cluster.derived[0]
        mid = Point3.mean(tet.vertices[:3])
        assert tet.vertices[3].distance_to(mid) == pytest.approx(2.0)

    def test_repeatable(self):
        assert build_tetrahedron_cluster(1.2) == build_tetrahedron_cluster(1.2)

    @pytest.mark.parametrize("scale", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_scale_raises(self, scale):
        with pytest.raises(ValueError, match="scale"):
            build_tetrahedron_cluster(scale)

    def test_non_numeric_scale_raises(self):
        with pytest.raises(TypeError, match="scale"):
            build_tetrahedron_cluster("1.0")
