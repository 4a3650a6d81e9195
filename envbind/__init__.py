"""Bind flat dataclass schemas to environment-style configuration sources."""

import logging

from .domain import ConfigSource
from .models.schema import FieldKind, FieldSpec, Schema, setting
from .services.binder import BindResult, FieldResolution, Origin, bind, load_settings, parse
from .utils import ConfigError, ConversionError, DotenvConfig, EnvConfig, InvalidConfigVariable

logging.getLogger("envbind").addHandler(logging.NullHandler())

__all__ = [
    "bind",
    "parse",
    "load_settings",
    "BindResult",
    "FieldResolution",
    "Origin",
    "ConfigSource",
    "EnvConfig",
    "DotenvConfig",
    "Schema",
    "FieldSpec",
    "FieldKind",
    "setting",
    "ConfigError",
    "ConversionError",
    "InvalidConfigVariable",
]
