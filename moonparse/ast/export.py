"""Structural export of the AST to plain data and back.

Every node and record becomes a dict tagged with `"type"` (the class name).
Nodes also carry their `"id"`. Tuples become lists, operator kinds become
their source spelling, and string literals keep both raw and interpreted
forms. The result is JSON-compatible, and `from_dict` rebuilds an equal tree
with the same ids.
"""

from __future__ import annotations

from dataclasses import MISSING, fields, is_dataclass
from enum import StrEnum
from typing import Any, cast

from moonparse.ast import model
from moonparse.ast.ids import IdAllocator
from moonparse.lexer import StringLiteral

type ExportedValue = None | bool | str | int | list[ExportedValue] | dict[str, ExportedValue]

_TYPES: dict[str, type] = {
    name: obj
    for name, obj in vars(model).items()
    if isinstance(obj, type) and is_dataclass(obj) and obj is not model.Node
}
_TYPES["StringLiteral"] = StringLiteral

_ENUM_FIELDS: dict[tuple[type, str], type[StrEnum]] = {
    (model.UnaryOp, "operator"): model.UnaryOpKind,
    (model.BinaryOp, "operator"): model.BinaryOpKind,
}


def to_dict(value: model.Node | model.Chunk, *, include_ids: bool = True) -> dict[str, ExportedValue]:
    """Export a node or chunk. With `include_ids=False` the output is purely structural."""
    return cast(dict[str, ExportedValue], _export(value, include_ids))


def from_dict(data: dict[str, Any], *, ids: IdAllocator | None = None) -> Any:
    """Rebuild a node or chunk from `to_dict` output.

    Nodes exported without ids get fresh ones from `ids`; without an allocator
    that is an error.
    """
    return _import(data, ids)


def _export(value: object, include_ids: bool) -> ExportedValue:
    if isinstance(value, StrEnum):
        return value.value
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, tuple):
        return [_export(item, include_ids) for item in value]
    if is_dataclass(value) and not isinstance(value, type):
        result: dict[str, ExportedValue] = {"type": type(value).__name__}
        for f in fields(value):
            if f.name == "id" and not include_ids:
                continue
            result[f.name] = _export(getattr(value, f.name), include_ids)
        return result
    raise TypeError(f"Cannot export value of type {type(value).__name__}")


def _import(value: Any, ids: IdAllocator | None) -> Any:
    if isinstance(value, list):
        return tuple(_import(item, ids) for item in value)
    if not isinstance(value, dict):
        return value

    type_name = value.get("type")
    cls = _TYPES.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        raise ValueError(f"Unknown AST type tag: {type_name!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in value:
            if f.name == "id" and ids is not None:
                kwargs["id"] = ids.allocate()
                continue
            if f.default is not MISSING:
                continue
            raise ValueError(f"{type_name} is missing field {f.name!r}")
        raw = value[f.name]
        enum_type = _ENUM_FIELDS.get((cls, f.name))
        kwargs[f.name] = enum_type(raw) if enum_type is not None else _import(raw, ids)
    return cls(**kwargs)
