"""Unit tests for the drive geometry configuration helpers."""
import json

import pytest

from swerve_drive import const
from swerve_drive.config import DriveGeometryConfig, load_config, save_config
from swerve_drive.exceptions import ConfigurationError, SwerveDriveError


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestDriveGeometryConfig:

    def test_defaults(self):
        config = DriveGeometryConfig()
        assert config.dist_front_back == const.DEFAULT_DIST_FRONT_BACK
        assert config.dist_left_right == const.DEFAULT_DIST_LEFT_RIGHT
        assert config.name == const.DEFAULT_CONFIG_NAME
        assert config.created_at
        assert config.modified_at

    def test_from_dict_converts_ints(self):
        config = DriveGeometryConfig.from_dict({"dist_front_back": 2, "dist_left_right": 1})
        assert config.dist_front_back == 2.0
        assert isinstance(config.dist_front_back, float)

    def test_from_dict_missing_keys(self):
        with pytest.raises(ConfigurationError, match="missing required keys"):
            DriveGeometryConfig.from_dict({"dist_front_back": 1.0})

    @pytest.mark.parametrize("bad_value", [0, -0.5, "wide", None, True, float("inf"), float("nan")])
    def test_from_dict_rejects_invalid_distance(self, bad_value):
        with pytest.raises(ConfigurationError):
            DriveGeometryConfig.from_dict({"dist_front_back": 1.0, "dist_left_right": bad_value})

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(ConfigurationError, match="JSON object"):
            DriveGeometryConfig.from_dict([1.0, 0.6])

    def test_from_dict_ignores_unknown_keys(self, caplog):
        config = DriveGeometryConfig.from_dict(
            {"dist_front_back": 1.0, "dist_left_right": 0.6, "wheel_diameter": 0.1}
        )
        assert not hasattr(config, "wheel_diameter")
        assert "wheel_diameter" in caplog.text


class TestLoadSave:

    def test_save_then_load(self, tmp_path):
        config = DriveGeometryConfig(dist_front_back=0.75, dist_left_right=0.55, name="practice_bot")
        written = save_config(config, tmp_path / "profiles" / "practice_bot.json")
        assert written.exists()

        loaded = load_config(written)
        assert loaded.dist_front_back == 0.75
        assert loaded.dist_left_right == 0.55
        assert loaded.name == "practice_bot"
        assert loaded.created_at == config.created_at

    def test_save_refreshes_modified_at(self, tmp_path):
        config = DriveGeometryConfig(modified_at="2000-01-01T00:00:00")
        save_config(config, tmp_path / "robot.json")
        assert config.modified_at != "2000-01-01T00:00:00"

    def test_load_minimal_file(self, tmp_path):
        path = _write_json(tmp_path / "robot.json", {"dist_front_back": 0.5, "dist_left_right": 0.5})
        config = load_config(str(path))
        assert config.dist_front_back == 0.5
        assert config.name == const.DEFAULT_CONFIG_NAME

    def test_load_missing_file(self, tmp_path):
        path = tmp_path / "nope.json"
        with pytest.raises(ConfigurationError, match="not found") as excinfo:
            load_config(path)
        assert excinfo.value.path == path
        assert str(path) in str(excinfo.value)

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_config(path)

    def test_load_invalid_geometry_reports_path(self, tmp_path):
        path = _write_json(tmp_path / "robot.json", {"dist_front_back": -1.0, "dist_left_right": 0.5})
        with pytest.raises(ConfigurationError, match="dist_front_back") as excinfo:
            load_config(path)
        assert excinfo.value.path == path

    def test_configuration_error_is_library_error(self, tmp_path):
        with pytest.raises(SwerveDriveError):
            load_config(tmp_path / "nope.json")
