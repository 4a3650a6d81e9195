"""
Schema binder: resolves each field of a dataclass instance against a
config source, falling back to the field's ``default`` annotation.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from ..domain import ConfigSource
from ..models.schema import FieldKind, FieldSpec, Schema
from ..utils import ConfigError, ConversionError, EnvConfig, InvalidConfigVariable, get_logger, parse_int

T = TypeVar("T")

_log = get_logger("envbind.binder")


class Origin(str, Enum):
    """Where a field's final value came from."""
    SOURCE = "source"
    DEFAULT = "default"
    ZERO = "zero"
    SKIPPED = "skipped"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldResolution:
    name: str
    kind: FieldKind
    value: Any
    origin: Origin


@dataclass(frozen=True)
class BindResult:
    """Outcome of one binding pass."""
    fields: tuple[FieldResolution, ...] = ()
    error: ConfigError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error

    def values(self) -> dict[str, Any]:
        """Returns the values written by the pass, keyed by field name."""
        return {
            r.name: r.value
            for r in self.fields
            if r.origin not in (Origin.SKIPPED, Origin.UNSUPPORTED)
        }


def bind(
    destination: Any,
    source: ConfigSource | None = None,
    *,
    schema: Schema | None = None,
    logger: logging.Logger | None = None,
) -> BindResult:
    """
    Binds every writable text/integer field of ``destination`` from ``source``.

    Only ConfigError is turned into a returned error; any other exception is a
    fault in the binder or the source and propagates.
    """
    log = logger or _log
    src = source if source is not None else EnvConfig()
    try:
        return _bind(destination, src, schema, log)
    except ConfigError as e:
        log.warning("binding aborted", extra={"code": e.code.value, "error": str(e)})
        return BindResult(error=e)


def parse(destination: Any, *, logger: logging.Logger | None = None) -> BindResult:
    """Binds ``destination`` from the process environment."""
    return bind(destination, EnvConfig(), logger=logger)


def load_settings(cls: type[T], source: ConfigSource | None = None, *, logger: logging.Logger | None = None) -> T:
    """Constructs ``cls()``, binds it and raises on a structural error."""
    instance = cls()
    bind(instance, source, logger=logger).raise_for_error()
    return instance


def _check_destination(destination: Any, schema: Schema | None) -> Schema:
    if isinstance(destination, type) or not dataclasses.is_dataclass(destination):
        raise InvalidConfigVariable(f"Invalid config variable: expected a dataclass instance, got {type(destination).__name__}")
    if type(destination).__dataclass_params__.frozen:
        raise InvalidConfigVariable(f"Invalid config variable: {type(destination).__name__} is frozen")
    if schema is None:
        return Schema.describe(destination)
    described = {f.name: f.kind for f in Schema.describe(destination)}
    unknown = [name for name in schema.names() if name not in described]
    if unknown:
        raise InvalidConfigVariable(f"Invalid config variable: unknown fields {unknown}")
    mismatched = [f.name for f in schema if f.kind is not described[f.name]]
    if mismatched:
        raise InvalidConfigVariable(f"Invalid config variable: kind does not match declared type for {mismatched}")
    return schema


def _bind(destination: Any, source: ConfigSource, schema: Schema | None, log: logging.Logger) -> BindResult:
    table = _check_destination(destination, schema)
    resolved: list[FieldResolution] = []

    for spec in table:
        if not spec.writable:
            log.info("skipping unassignable field", extra={"field": spec.name})
            resolved.append(FieldResolution(spec.name, spec.kind, getattr(destination, spec.name, None), Origin.SKIPPED))
            continue

        if spec.kind is FieldKind.TEXT:
            value, origin = _resolve_text(spec, source)
        elif spec.kind is FieldKind.INTEGER:
            value, origin = _resolve_int(spec, source)
        else:
            log.info("field type not supported", extra={"field": spec.name, "type": spec.type_name})
            resolved.append(FieldResolution(spec.name, spec.kind, getattr(destination, spec.name, None), Origin.UNSUPPORTED))
            continue

        log.info("setting field", extra={"field": spec.name, "value": value, "origin": origin.value})
        setattr(destination, spec.name, value)
        resolved.append(FieldResolution(spec.name, spec.kind, value, origin))

    return BindResult(fields=tuple(resolved))


def _resolve_text(spec: FieldSpec, source: ConfigSource) -> tuple[str, Origin]:
    raw = source.get_str(spec.name)
    if raw == "":
        return spec.default, Origin.DEFAULT
    return raw, Origin.SOURCE


def _resolve_int(spec: FieldSpec, source: ConfigSource) -> tuple[int, Origin]:
    try:
        return source.get_int(spec.name), Origin.SOURCE
    except ValueError:
        pass
    try:
        return parse_int(spec.default), Origin.DEFAULT
    except ConversionError:
        # neither source nor default parse; silently zero
        return 0, Origin.ZERO
