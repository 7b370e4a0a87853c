"""
Config Manager

Loads gauge configuration from YAML, validates it and builds GaugeConfig.
Falls back to the bundled factory defaults when the file cannot be used.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from gauge_engine.models.enums import LogCategory
from gauge_engine.models.gauge_config import GaugeConfig
from gauge_engine.models.schemas import GaugeFileSchema
from gauge_engine.utils.logger import get_logger
from gauge_engine.utils.numbers import round_half_up, round_to

log = get_logger().for_category(LogCategory.CONFIG)

CONFIG_DIR = Path(__file__).parent.parent / "config"
FACTORY_DEFAULTS_PATH = CONFIG_DIR / "factory_defaults.yaml"


class ConfigError(ValueError):
    """Configuration could not be loaded or validated"""


def label_transform_for(decimals: Optional[int]) -> Callable[[float], Any]:
    """Label transform for a precision setting (None = nearest integer)."""
    if decimals is None:
        return round_half_up

    def transform(value: float) -> float:
        return round_to(value, decimals)

    return transform


class ConfigManager:
    """
    Gauge configuration manager

    Example:
        config = ConfigManager("config/gauge.yaml")
        config.load()

        gauge = GaugeState(config.gauge_config)
        scheduler = AsyncioFrameScheduler(fps=config.fps)
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        defaults_path: Union[str, Path] = FACTORY_DEFAULTS_PATH,
    ):
        """
        Args:
            config_path: YAML file to load (None = factory defaults only)
            defaults_path: Fallback YAML file
        """
        self.config_path = Path(config_path) if config_path else None
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.schema: GaugeFileSchema = GaugeFileSchema()
        self.used_defaults = False

    def load(self) -> GaugeFileSchema:
        """
        Load and validate configuration

        Process:
        1. Load config_path if given
        2. Validate with GaugeFileSchema
        3. Fall back to factory defaults on any failure

        Returns:
            Validated configuration

        Raises:
            ConfigError: factory defaults are unusable too
        """
        if self.config_path is not None:
            try:
                self.data = self._read_yaml(self.config_path)
                self.schema = GaugeFileSchema.model_validate(self.data)
                self.used_defaults = False
                log.info(f"Loaded {self.config_path.name}", keys=str(list(self.data.keys())))
                return self.schema
            except (OSError, yaml.YAMLError, ValidationError) as ex:
                log.error(f"Failed to load {self.config_path}", error=str(ex), error_type=type(ex).__name__)
                log.warn("Falling back to factory defaults")

        try:
            self.data = self._read_yaml(self.factory_defaults_path)
            self.schema = GaugeFileSchema.model_validate(self.data)
        except (OSError, yaml.YAMLError, ValidationError) as ex:
            raise ConfigError(f"Factory defaults unusable: {ex}") from ex

        self.used_defaults = True
        log.info("Using factory defaults", path=str(self.factory_defaults_path))
        return self.schema

    def build(self, overrides: Optional[Dict[str, Any]] = None) -> GaugeConfig:
        """
        Build a GaugeConfig from the loaded gauge section plus overrides.

        Raises:
            ConfigError: overrides fail validation
        """
        merged = {**self.schema.gauge.model_dump(), **(overrides or {})}
        try:
            validated = GaugeFileSchema.model_validate({"gauge": merged}).gauge
        except ValidationError as ex:
            raise ConfigError(str(ex)) from ex

        fields = validated.model_dump()
        decimals = fields.pop("label_decimals")
        return GaugeConfig(label_transform=label_transform_for(decimals), **fields)

    @property
    def gauge_config(self) -> GaugeConfig:
        return self.build()

    @property
    def fps(self) -> int:
        return self.schema.scheduler.fps

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data or {}
