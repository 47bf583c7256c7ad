"""fsdfs Infrastructure.

Services used by the coordinator and by callers:
- ConfigManager: Hierarchical configuration (defaults, YAML, environment)
- Logger: Structured logging
"""

from .config_manager import ConfigError, ConfigManager, ConfigSource, get_config_manager, set_global_config
from .logger import Logger, LogLevel, get_logger, set_global_logger

__all__ = [
    # Logger exports
    "Logger",
    "LogLevel",
    "get_logger",
    "set_global_logger",
    # ConfigManager exports
    "ConfigSource",
    "ConfigError",
    "ConfigManager",
    "get_config_manager",
    "set_global_config",
]
