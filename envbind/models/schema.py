from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_TAG = "default"


class FieldKind(str, Enum):
    """Field kinds the binder dispatches on."""
    TEXT = "text"
    INTEGER = "integer"
    UNSUPPORTED = "unsupported"

    @staticmethod
    def of(tp: Any) -> FieldKind:
        # bool subclasses int but is not an integer field
        if tp is str or tp == "str":
            return FieldKind.TEXT
        if tp is int or tp == "int":
            return FieldKind.INTEGER
        return FieldKind.UNSUPPORTED


@dataclass(frozen=True)
class FieldSpec:
    """
    One field descriptor: name, kind and the raw default annotation.
    """
    name: str
    kind: FieldKind
    default: str = ""
    type_name: str = ""

    @property
    def writable(self) -> bool:
        return not self.name.startswith("_")


@dataclass(frozen=True)
class Schema:
    """
    Ordered, immutable field-descriptor table.

    Built explicitly::

        Schema().text("host", "localhost").integer("port", "8080")

    or derived from a dataclass instance with ``Schema.describe``.
    """
    fields: tuple[FieldSpec, ...] = ()

    def add(self, name: str, kind: FieldKind, default: str = "", type_name: str = "") -> Schema:
        return Schema(self.fields + (FieldSpec(name, kind, default, type_name),))

    def text(self, name: str, default: str = "") -> Schema:
        return self.add(name, FieldKind.TEXT, default, "str")

    def integer(self, name: str, default: str = "") -> Schema:
        return self.add(name, FieldKind.INTEGER, default, "int")

    def names(self) -> list[str]:
        return [f.name for f in self.fields]

    def __iter__(self):
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @staticmethod
    def describe(record: Any) -> Schema:
        """Derives the table from a dataclass instance (or class)."""
        cls = record if isinstance(record, type) else type(record)
        try:
            hints = typing.get_type_hints(cls)
        except (NameError, TypeError):
            hints = {}
        specs = []
        for f in dataclasses.fields(cls):
            tp = hints.get(f.name, f.type)
            specs.append(FieldSpec(f.name, FieldKind.of(tp), default_of(f), _type_name(tp)))
        return Schema(tuple(specs))


def default_of(f: dataclasses.Field) -> str:
    value = f.metadata.get(DEFAULT_TAG)
    return "" if value is None else str(value)


def _type_name(tp: Any) -> str:
    if isinstance(tp, str):
        return tp
    return getattr(tp, "__name__", None) or str(tp)


def setting(default: str | None = None, *, initial: Any = None, **kwargs: Any) -> Any:
    """
    dataclasses.field() carrying a ``default`` annotation.

    ``default`` is the raw fallback string the binder uses; ``initial`` is
    the attribute value a freshly constructed instance holds.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if default is not None:
        metadata[DEFAULT_TAG] = str(default)
    return field(default=initial, metadata=metadata, **kwargs)
