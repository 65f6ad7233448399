"""Tests for the solidscene public API."""

import logging

import solidscene


class TestPublicAPI:
    def test_all_names_importable(self):
        for name in solidscene.__all__:
            assert hasattr(solidscene, name), f"{name} not importable from solidscene"

    def test_package_logger_has_null_handler(self):
        logger = logging.getLogger("solidscene")
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_end_to_end_tetrahedra_to_mpl(self, tmp_path):
        out = tmp_path / "tetrahedra.png"
        solidscene.tetrahedron_scene().render_mpl(output=out)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_end_to_end_prism_to_mpl(self, tmp_path):
        out = tmp_path / "prism.png"
        solidscene.prism_scene().render_mpl(output=out)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_end_to_end_diamond_to_mpl(self, tmp_path):
        out = tmp_path / "diamond.svg"
        solidscene.diamond_scene().render_mpl(output=out)
        assert out.exists()
        assert out.stat().st_size > 0
