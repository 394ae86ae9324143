"""
Tests for ConfigManager and AnimatorConfig.
"""

import pytest

from chart_animator.managers.config_manager import ConfigManager
from chart_animator.models.config import AnimatorConfig
from chart_animator.models.enums import EasingOption, LogLevel
from chart_animator.utils.logger import get_logger


@pytest.fixture
def write_config(tmp_path):
    def _write(text: str):
        path = tmp_path / "animator.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


class TestConfigManager:

    def test_factory_defaults(self):
        config = ConfigManager().load()

        assert config.fps == 60
        assert config.default_easing is EasingOption.EASE_IN_OUT_SINE
        assert config.default_duration == 1.0
        assert config.log_level is LogLevel.INFO

    def test_user_config(self, write_config):
        path = write_config(
            "animator:\n"
            "  fps: 30\n"
            "  default_easing: ease-out-bounce\n"
            "  default_duration: 2.5\n"
            "logging:\n"
            "  level: debug\n"
            "  colors: false\n"
        )
        manager = ConfigManager(path)
        config = manager.load()

        assert config.fps == 30
        assert config.default_easing is EasingOption.EASE_OUT_BOUNCE
        assert config.default_duration == 2.5
        assert config.log_level is LogLevel.DEBUG
        assert config.log_colors is False
        assert manager.data["animator"]["fps"] == 30

    def test_partial_config_keeps_defaults(self, write_config):
        config = ConfigManager(write_config("animator:\n  fps: 120\n")).load()

        assert config.fps == 120
        assert config.default_easing is EasingOption.EASE_IN_OUT_SINE

    def test_missing_file_falls_back(self, tmp_path):
        config = ConfigManager(tmp_path / "nope.yaml").load()
        assert config == AnimatorConfig()

    def test_invalid_yaml_falls_back(self, write_config):
        config = ConfigManager(write_config("animator: [unclosed\n")).load()
        assert config.fps == 60

    def test_unknown_easing_falls_back(self, write_config):
        config = ConfigManager(write_config("animator:\n  default_easing: wobble\n")).load()
        assert config.default_easing is EasingOption.EASE_IN_OUT_SINE

    @pytest.mark.parametrize("body", [
        "animator: 5\n",
        "logging: [1, 2]\n",
        "animator:\n  default_easing: 5\n",
        "logging:\n  level: [debug]\n",
        "animator:\n  fps: fast\n",
        "animator:\n  fps: [60]\n",
        "animator:\n  default_duration: long\n",
    ])
    def test_wrong_shape_falls_back(self, write_config, body):
        config = ConfigManager(write_config(body)).load()
        assert config == AnimatorConfig()

    def test_non_mapping_root_falls_back(self, write_config):
        config = ConfigManager(write_config("- just\n- a list\n")).load()
        assert config == AnimatorConfig()

    def test_empty_file_uses_defaults(self, write_config):
        config = ConfigManager(write_config("")).load()
        assert config == AnimatorConfig()

    def test_apply_logging(self, write_config):
        manager = ConfigManager(write_config("logging:\n  level: ERROR\n  colors: false\n"))
        manager.load()
        manager.apply_logging()

        logger = get_logger()
        assert logger.min_level is LogLevel.ERROR
        assert logger.use_colors is False


class TestAnimatorConfig:

    def test_fps_clamped(self):
        assert AnimatorConfig(fps=1000).fps == 240
        assert AnimatorConfig(fps=0).fps == 1

    @pytest.mark.parametrize("data", [
        {"animator": 5},
        {"logging": [1, 2]},
        {"animator": {"default_easing": 5}},
        {"logging": {"level": 0}},
        ["animator"],
    ])
    def test_from_dict_rejects_wrong_shapes(self, data):
        with pytest.raises(ValueError):
            AnimatorConfig.from_dict(data)

    def test_from_dict_null_sections_use_defaults(self):
        assert AnimatorConfig.from_dict({"animator": None, "logging": None}) == AnimatorConfig()

    def test_negative_default_duration_clamped(self):
        assert AnimatorConfig(default_duration=-1).default_duration == 0.0

    def test_to_dict_uses_names(self):
        data = AnimatorConfig(default_easing=EasingOption.EASE_IN_BACK).to_dict()

        assert data["animator"]["default_easing"] == "EASE_IN_BACK"
        assert data["logging"]["level"] == "INFO"
        assert AnimatorConfig.from_dict(data).default_easing is EasingOption.EASE_IN_BACK
