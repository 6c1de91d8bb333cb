# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""Tests for concrete color types and conversions between them."""

import numpy as np
import pytest

from colormetry.schema import (
    DEFAULT_ILLUMINANT,
    WHITE_POINTS,
    CIELUVColor,
    Illuminant,
    InvalidHexCodeError,
    RGBColor,
    XYZColor,
)


class TestIlluminants:

    def test_every_illuminant_has_white_point(self):
        for illuminant in Illuminant:
            assert illuminant in WHITE_POINTS

    def test_white_points_normalized(self):
        for illuminant in Illuminant:
            assert illuminant.white_point[1] == 1.0

    def test_d65_white_point(self):
        assert Illuminant.D65.white_point == (0.95047, 1.00000, 1.08883)

    def test_default_is_d50(self):
        assert DEFAULT_ILLUMINANT is Illuminant.D50


class TestXYZColor:

    def test_white_point_constructor(self):
        wp = XYZColor.white_point(Illuminant.E)
        assert wp == XYZColor(1.0, 1.0, 1.0, Illuminant.E)

    def test_same_illuminant_is_identity(self):
        xyz = XYZColor(0.3, 0.53, 0.65, Illuminant.D50)
        assert xyz.to_xyz(Illuminant.D50) is xyz

    def test_adapt_white(self):
        adapted = XYZColor.white_point(Illuminant.D65).color_adapt(Illuminant.D50)
        assert adapted.illuminant is Illuminant.D50
        np.testing.assert_allclose(
            adapted.as_array(), Illuminant.D50.as_array(), atol=1e-9
        )

    def test_adapt_roundtrip(self):
        xyz = XYZColor(0.3, 0.53, 0.65, Illuminant.D50)
        back = xyz.color_adapt(Illuminant.F11).color_adapt(Illuminant.D50)
        assert back.approx_equal(xyz)

    def test_from_xyz_passthrough(self):
        xyz = XYZColor(0.1, 0.2, 0.3)
        assert XYZColor.from_xyz(xyz) is xyz


class TestRGBColor:

    def test_from_hex(self):
        assert RGBColor.from_hex_code("#ff0000") == RGBColor(1.0, 0.0, 0.0)

    def test_from_bad_hex(self):
        with pytest.raises(InvalidHexCodeError):
            RGBColor.from_hex_code("#ff00")

    def test_str_is_hex(self):
        assert str(RGBColor(0.0, 0.0, 1.0)) == "#0000FF"

    def test_white_to_xyz_d65(self):
        xyz = RGBColor(1.0, 1.0, 1.0).to_xyz(Illuminant.D65)
        np.testing.assert_allclose(xyz.as_array(), Illuminant.D65.as_array(), atol=1e-6)

    def test_white_to_xyz_d50(self):
        xyz = RGBColor(1.0, 1.0, 1.0).to_xyz(Illuminant.D50)
        np.testing.assert_allclose(xyz.as_array(), Illuminant.D50.as_array(), atol=1e-6)

    @pytest.mark.parametrize("illuminant", [Illuminant.D50, Illuminant.D65, Illuminant.A])
    def test_xyz_roundtrip(self, illuminant):
        rgb = RGBColor(0.2, 0.4, 0.6)
        back = RGBColor.from_xyz(rgb.to_xyz(illuminant))
        np.testing.assert_allclose(
            back.to_coord().as_array(), rgb.to_coord().as_array(), atol=1e-9
        )

    def test_coord_bijection(self):
        rgb = RGBColor(0.1, 0.5, 0.9)
        assert RGBColor.from_coord(rgb.to_coord()) == rgb


class TestCIELUVColor:

    def test_xyz_roundtrip_d50(self):
        xyz = XYZColor(0.3, 0.53, 0.65, Illuminant.D50)
        luv = CIELUVColor.from_xyz(xyz)
        assert luv.to_xyz(Illuminant.D50).approx_equal(xyz)

    def test_luv_roundtrip(self):
        luv = CIELUVColor(50.0, 20.0, -30.0)
        back = CIELUVColor.from_xyz(luv.to_xyz(Illuminant.D65))
        np.testing.assert_allclose(
            back.to_coord().as_array(), [50.0, 20.0, -30.0], atol=1e-6
        )

    def test_dark_roundtrip(self):
        luv = CIELUVColor(4.0, 1.5, -2.0)
        back = CIELUVColor.from_xyz(luv.to_xyz(Illuminant.D50))
        np.testing.assert_allclose(back.to_coord().as_array(), [4.0, 1.5, -2.0], atol=1e-6)

    def test_negative_lightness_roundtrip(self):
        luv = CIELUVColor(-5.0, 1.0, -2.0)
        back = CIELUVColor.from_xyz(luv.to_xyz(Illuminant.D50))
        np.testing.assert_allclose(back.to_coord().as_array(), [-5.0, 1.0, -2.0], atol=1e-6)

    def test_negative_xyz_roundtrip(self):
        xyz = XYZColor(-0.01, -0.01, -0.01, Illuminant.D50)
        luv = CIELUVColor.from_xyz(xyz)
        assert luv.L < 0.0
        assert luv.to_xyz(Illuminant.D50).approx_equal(xyz)

    def test_white_is_neutral(self):
        luv = CIELUVColor.from_xyz(XYZColor.white_point(Illuminant.D50))
        assert luv.L == pytest.approx(100.0)
        assert luv.u == pytest.approx(0.0, abs=1e-10)
        assert luv.v == pytest.approx(0.0, abs=1e-10)

    def test_black(self):
        luv = CIELUVColor.from_xyz(XYZColor(0.0, 0.0, 0.0))
        assert luv == CIELUVColor(0.0, 0.0, 0.0)
        assert luv.to_xyz(Illuminant.D50) == XYZColor(0.0, 0.0, 0.0, Illuminant.D50)

    def test_uses_illuminant_of_source(self):
        """u and v are measured from the white of the XYZ's own illuminant."""
        for illuminant in (Illuminant.A, Illuminant.D65):
            luv = CIELUVColor.from_xyz(XYZColor.white_point(illuminant))
            assert luv.u == pytest.approx(0.0, abs=1e-10)


class TestConvert:

    def test_same_type_returns_self(self):
        rgb = RGBColor(0.3, 0.3, 0.3)
        assert rgb.convert(RGBColor) is rgb

    def test_rgb_luv_roundtrip(self):
        rgb = RGBColor(0.2, 0.4, 0.6)
        back = rgb.convert(CIELUVColor).convert(RGBColor)
        np.testing.assert_allclose(
            back.to_coord().as_array(), rgb.to_coord().as_array(), atol=1e-6
        )

    def test_out_of_gamut_rgb_luv_roundtrip(self):
        rgb = RGBColor(-0.05, -0.05, -0.05)
        back = rgb.convert(CIELUVColor).convert(RGBColor)
        np.testing.assert_allclose(
            back.to_coord().as_array(), [-0.05, -0.05, -0.05], atol=1e-6
        )

    def test_white_rgb_to_luv(self):
        luv = RGBColor(1.0, 1.0, 1.0).convert(CIELUVColor)
        assert luv.L == pytest.approx(100.0, abs=1e-4)
        assert luv.u == pytest.approx(0.0, abs=1e-3)
        assert luv.v == pytest.approx(0.0, abs=1e-3)

    def test_convert_to_xyz_uses_default_illuminant(self):
        xyz = RGBColor(0.5, 0.1, 0.9).convert(XYZColor)
        assert xyz.illuminant is DEFAULT_ILLUMINANT

    def test_approx_equal_across_types(self):
        rgb = RGBColor(0.7, 0.2, 0.1)
        assert rgb.approx_equal(rgb.convert(CIELUVColor))
        assert not rgb.approx_equal(RGBColor(0.7, 0.2, 0.2))
