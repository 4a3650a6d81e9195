from .config import DotenvConfig, EnvConfig
from .errors import ConfigError, ConversionError, ErrorCode, InvalidConfigVariable
from .logger import JsonFormatter, PlainFormatter, configure_logging, get_logger
from .parsing import INT_MAX, INT_MIN, parse_int

__all__ = [
    "EnvConfig",
    "DotenvConfig",
    "ConfigError",
    "ConversionError",
    "InvalidConfigVariable",
    "ErrorCode",
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "PlainFormatter",
    "parse_int",
    "INT_MIN",
    "INT_MAX",
]
