from .loader import ConfigError, load_config, get_config, reload_config
from .schema import IndicatorsConfig, KdjConfig, MacdConfig, LoggingConfig, OutputConfig

__all__ = [
    "ConfigError",
    "load_config",
    "get_config",
    "reload_config",
    "IndicatorsConfig",
    "KdjConfig",
    "MacdConfig",
    "LoggingConfig",
    "OutputConfig",
]
