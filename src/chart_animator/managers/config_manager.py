"""
Config Manager

Loads the animator YAML configuration, falling back to the packaged
factory defaults when the user file is missing or invalid.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from chart_animator.models.config import AnimatorConfig
from chart_animator.models.enums import LogCategory
from chart_animator.utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.CONFIG)

FACTORY_DEFAULTS_PATH = Path(__file__).parent.parent / "config" / "factory_defaults.yaml"


class ConfigManager:
    """
    Configuration manager with factory-defaults fallback

    Example:
        manager = ConfigManager("animator.yaml")
        config = manager.load()
        manager.apply_logging()

        animator = Animator(ticker, config=config)
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        defaults_path: Union[str, Path] = FACTORY_DEFAULTS_PATH,
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to user config YAML (None = factory defaults only)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path) if config_path else None
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.config: AnimatorConfig = AnimatorConfig()

    def load(self) -> AnimatorConfig:
        """
        Load YAML configuration

        Process:
        1. Load user config if a path was given
        2. On any read/parse/validation failure log it and use factory defaults
        3. Build AnimatorConfig

        Returns:
            Loaded AnimatorConfig
        """
        if self.config_path is not None:
            try:
                self.data = self._read_yaml(self.config_path)
                self.config = AnimatorConfig.from_dict(self.data)
                log.info("Configuration loaded", path=str(self.config_path))
                return self.config
            except (OSError, yaml.YAMLError, ValueError, TypeError) as ex:
                log.error("Failed to load config", path=str(self.config_path),
                          error=str(ex), error_type=type(ex).__name__)
                log.warn("Falling back to factory defaults")

        self.data = self._read_yaml(self.factory_defaults_path)
        self.config = AnimatorConfig.from_dict(self.data)
        log.debug("Factory defaults loaded", path=str(self.factory_defaults_path))
        return self.config

    def apply_logging(self) -> None:
        """Push the logging section into the logger singleton"""
        configure_logger(self.config.log_level, self.config.log_colors)

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")
        return data
