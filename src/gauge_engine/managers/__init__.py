from .config_manager import ConfigError, ConfigManager, label_transform_for

__all__ = ['ConfigError', 'ConfigManager', 'label_transform_for']
