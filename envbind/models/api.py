from typing import Any

from pydantic import BaseModel, Field


class FieldResolutionOut(BaseModel):
    name: str = Field(..., description="Field name (lookup key before source transform)")
    kind: str = Field(..., description="text, integer or unsupported")
    value: Any = Field(None, description="Value held after binding")
    origin: str = Field(..., description="source, default, zero, skipped or unsupported")


class FieldSpecOut(BaseModel):
    name: str = Field(..., description="Field name")
    kind: str = Field(..., description="text, integer or unsupported")
    default: str = Field("", description="Raw default annotation")
    type_name: str = Field("", description="Declared Python type")


class SettingsOut(BaseModel):
    status: str = Field(..., description="ok when the bind succeeded")
    fields: list[FieldResolutionOut] = Field(default_factory=list, description="Per-field resolutions")


class SchemaOut(BaseModel):
    fields: list[FieldSpecOut] = Field(default_factory=list, description="Field descriptor table")
