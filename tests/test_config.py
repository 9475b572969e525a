"""Tests for configuration and validation helpers."""

import pytest

from snaplocate.core.config import Config
from snaplocate.core.errors import CoordinateRangeError
from snaplocate.utils.validation import validate_bounds, validate_coordinates


class TestConfig:
    def test_defaults(self) -> None:
        settings = Config(_env_file=None)
        assert settings.threshold_cutoff == 128
        assert settings.crop_target_width == 2000
        assert settings.footer_crop_start == 0.6
        assert settings.header_crop_end == 0.4
        assert settings.locator_workers == 1
        assert settings.validate_config()

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("SNAPLOCATE_THRESHOLD_CUTOFF", "100")
        monkeypatch.setenv("SNAPLOCATE_TESSERACT_LANG", "fra")
        settings = Config(_env_file=None)
        assert settings.threshold_cutoff == 100
        assert settings.tesseract_lang == "fra"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"threshold_cutoff": 300},
            {"threshold_cutoff": -5},
            {"footer_crop_start": 0},
            {"header_crop_end": 1.0},
        ],
    )
    def test_validate_config_rejects(self, overrides) -> None:
        with pytest.raises(ValueError):
            Config(_env_file=None, **overrides).validate_config()

    def test_field_constraints(self) -> None:
        with pytest.raises(ValueError):
            Config(_env_file=None, locator_workers=0)
        with pytest.raises(ValueError):
            Config(_env_file=None, crop_target_width=0)


class TestValidation:
    def test_coordinates_in_range(self) -> None:
        assert validate_coordinates(0, 0, 1080, 1920)
        assert validate_coordinates(1080, 1920, 1080, 1920)

    def test_coordinates_out_of_range(self) -> None:
        assert not validate_coordinates(-1, 0, 1080, 1920)
        assert not validate_coordinates(0, 1921, 1080, 1920)
        assert validate_coordinates(0, 1921, 1080, 1920, tolerance=1)

    def test_coordinates_not_numeric(self) -> None:
        assert not validate_coordinates("left", 0, 1080, 1920)

    def test_bounds(self) -> None:
        validate_bounds(10, 10, 100, 100, 1080, 1920)
        with pytest.raises(CoordinateRangeError):
            validate_bounds(1000, 10, 100, 100, 1080, 1920)
        with pytest.raises(CoordinateRangeError):
            validate_bounds(10, 10, -1, 100, 1080, 1920)
