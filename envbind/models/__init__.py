from .api import FieldResolutionOut, FieldSpecOut, SchemaOut, SettingsOut
from .schema import DEFAULT_TAG, FieldKind, FieldSpec, Schema, setting
from .settings import LoggingSettings, ServiceSettings

__all__ = [
    "DEFAULT_TAG",
    "FieldKind",
    "FieldSpec",
    "Schema",
    "setting",
    "LoggingSettings",
    "ServiceSettings",
    "FieldResolutionOut",
    "FieldSpecOut",
    "SchemaOut",
    "SettingsOut",
]
