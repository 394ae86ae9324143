"""
Configuration models

AnimatorConfig is the typed view of the YAML configuration:

    animator:
      fps: 60
      default_easing: EASE_IN_OUT_SINE
      default_duration: 1.0
    logging:
      level: INFO
      colors: true
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from chart_animator.models.enums import EasingOption, LogLevel
from chart_animator.utils.enum_helper import EnumHelper

MIN_FPS = 1
MAX_FPS = 240


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """data[key] as a mapping; absent or empty (null) sections read as {}"""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a mapping, got {type(value).__name__}")
    return value


@dataclass
class AnimatorConfig:
    """
    Engine settings

    Attributes:
        fps: Target tick frequency for FrameTicker (1-240)
        default_easing: Preset used by the convenience animate_* forms
        default_duration: Duration (seconds) used by the demo runner
        log_level: Minimum log level
        log_colors: Enable ANSI colors in log output
    """
    fps: int = 60
    default_easing: EasingOption = EasingOption.EASE_IN_OUT_SINE
    default_duration: float = 1.0
    log_level: LogLevel = LogLevel.INFO
    log_colors: bool = True

    def __post_init__(self):
        self.fps = max(MIN_FPS, min(int(self.fps), MAX_FPS))
        self.default_duration = max(0.0, float(self.default_duration))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AnimatorConfig":
        """
        Build config from parsed YAML.

        Missing sections/keys fall back to defaults.

        Raises:
            ValueError: a section is not a mapping, or an easing/log level
                value is not a known name
        """
        root = data if data is not None else {}
        if not isinstance(root, dict):
            raise ValueError(f"Config root must be a mapping, got {type(root).__name__}")
        animator = _section(root, "animator")
        logging = _section(root, "logging")
        defaults = cls()

        easing = animator.get("default_easing")
        level = logging.get("level")

        return cls(
            fps=animator.get("fps", defaults.fps),
            default_easing=(
                EnumHelper.from_string(EasingOption, easing) if easing is not None else defaults.default_easing
            ),
            default_duration=animator.get("default_duration", defaults.default_duration),
            log_level=EnumHelper.from_string(LogLevel, level) if level is not None else defaults.log_level,
            log_colors=bool(logging.get("colors", defaults.log_colors)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "animator": {
                "fps": self.fps,
                "default_easing": EnumHelper.to_string(self.default_easing),
                "default_duration": self.default_duration,
            },
            "logging": {
                "level": EnumHelper.to_string(self.log_level),
                "colors": self.log_colors,
            },
        }
