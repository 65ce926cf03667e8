"""Tests for ferrux_projection.camera.projection and camera.utils."""

import math

import numpy as np
import pytest


class TestComputeTerms:
    def test_aspect_ratio(self):
        from ferrux_projection import compute_aspect_ratio

        assert compute_aspect_ratio(1920, 1080) == pytest.approx(16 / 9, rel=1e-6)
        assert isinstance(compute_aspect_ratio(1, 1), np.float32)

    def test_aspect_ratio_zero_height(self):
        from ferrux_projection import compute_aspect_ratio

        assert np.isinf(compute_aspect_ratio(1280, 0))
        assert np.isnan(compute_aspect_ratio(0, 0))

    @pytest.mark.parametrize("fov", [30.0, 60.0, 90.0, 120.0])
    def test_fov_scale_is_cotangent_of_half_angle(self, fov):
        from ferrux_projection import compute_fov_scale

        expected = 1.0 / math.tan(math.radians(fov / 2))
        assert compute_fov_scale(fov) == pytest.approx(expected, rel=1e-5)

    def test_fov_scale_single_precision(self):
        from ferrux_projection import compute_fov_scale

        assert isinstance(compute_fov_scale(90.0), np.float32)


class TestBuildPerspectiveMatrix:
    def test_matches_builder(self, custom_builder):
        from ferrux_projection import build_perspective_matrix

        m = build_perspective_matrix(near=5.0, far=500.0, fov=100.0, width=1920, height=1080)
        assert np.array_equal(m, custom_builder.build())

    def test_defaults_match_builder(self, default_builder):
        from ferrux_projection import build_perspective_matrix

        assert np.array_equal(build_perspective_matrix(), default_builder.build())

    def test_validates_fov(self):
        from ferrux_projection import build_perspective_matrix, InvalidFieldOfViewError

        with pytest.raises(InvalidFieldOfViewError):
            build_perspective_matrix(fov=0.0)

    def test_validates_clip_range(self):
        from ferrux_projection import build_perspective_matrix, InvalidClipRangeError

        with pytest.raises(InvalidClipRangeError):
            build_perspective_matrix(near=1.0, far=0.5)

    def test_assemble_skips_validation(self):
        from ferrux_projection import assemble_projection_matrix

        m = assemble_projection_matrix(10.0, 1.0, 90.0, 1280, 720)
        assert m[2][2] == pytest.approx(1.0 * -9.0)
        assert m[3][2] == pytest.approx(-10.0 / -9.0, rel=1e-6)

    def test_only_five_entries_set(self):
        from ferrux_projection import build_perspective_matrix

        m = build_perspective_matrix(near=1.0, far=10.0, fov=75.0, width=800, height=600)
        nonzero = {tuple(idx) for idx in np.argwhere(m != 0.0)}
        assert nonzero == {(0, 0), (1, 1), (2, 2), (3, 2), (2, 3)}

