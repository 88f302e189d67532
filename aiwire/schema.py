"""Declarative JSON wire models built on dataclasses."""

from __future__ import annotations

import dataclasses
import functools
import inspect
import json
import re
import types
from enum import Enum
from typing import Any, TypeVar, Union, get_args, get_origin

_RENAME = "wire_rename"
_OMIT = "wire_omit_if_none"
_NONE_TYPE = type(None)

_BUILTINS: dict[str, Any] = {
    "None": _NONE_TYPE,
    "Any": Any,
    "list": list,
    "dict": dict,
    "tuple": tuple,
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "bytes": bytes,
    "object": object,
}

_LEXEME_RE = re.compile(r"\s*(?:([A-Za-z_][\w.]*)|('[^']*'|\"[^\"]*\")|(\S))")


def wire_field(
    *,
    rename=None,
    omit_if_none=False,
    default=dataclasses.MISSING,
    default_factory=dataclasses.MISSING,
):
    """Declare a dataclass field with its JSON key and whether ``None`` is left out."""
    metadata = {_RENAME: rename, _OMIT: omit_if_none}
    return dataclasses.field(
        default=default, default_factory=default_factory, metadata=metadata
    )


def _key(field: dataclasses.Field) -> str:
    return field.metadata.get(_RENAME) or field.name


def _split_annotation(text: str) -> list[tuple[str, str]]:
    pieces = []
    for name, quoted, symbol in _LEXEME_RE.findall(text):
        if name:
            pieces.append(("name", name))
        elif quoted:
            pieces.append(("str", quoted[1:-1]))
        else:
            pieces.append(("sym", symbol))
    return pieces


class _AnnotationParser:
    """Resolves a postponed annotation string against a module namespace."""

    def __init__(self, text: str, namespace: dict[str, Any]):
        self._text = text
        self._pieces = _split_annotation(text)
        self._pos = 0
        self._namespace = namespace

    def parse(self) -> Any:
        result = self._union()
        if self._pos != len(self._pieces):
            raise TypeError(f"cannot read annotation {self._text!r}")
        return result

    def _peek(self) -> tuple[str, str] | None:
        if self._pos < len(self._pieces):
            return self._pieces[self._pos]
        return None

    def _take(self) -> tuple[str, str]:
        piece = self._peek()
        if piece is None:
            raise TypeError(f"annotation {self._text!r} ends too early")
        self._pos += 1
        return piece

    def _union(self) -> Any:
        members = [self._primary()]
        while self._peek() == ("sym", "|"):
            self._pos += 1
            members.append(self._primary())
        if len(members) == 1:
            return members[0]
        return Union[tuple(members)]

    def _primary(self) -> Any:
        kind, text = self._take()
        if kind == "str":
            return _AnnotationParser(text, self._namespace).parse()
        if kind != "name":
            raise TypeError(f"unexpected {text!r} in annotation {self._text!r}")
        base = self._lookup(text)
        if self._peek() != ("sym", "["):
            return base
        self._pos += 1
        args = [self._union()]
        while self._peek() == ("sym", ","):
            self._pos += 1
            args.append(self._union())
        if self._take() != ("sym", "]"):
            raise TypeError(f"unbalanced brackets in annotation {self._text!r}")
        return base[args[0]] if len(args) == 1 else base[tuple(args)]

    def _lookup(self, dotted: str) -> Any:
        head, *rest = dotted.split(".")
        if head in self._namespace:
            value = self._namespace[head]
        elif head in _BUILTINS:
            value = _BUILTINS[head]
        else:
            raise TypeError(f"cannot resolve {dotted!r} in annotation {self._text!r}")
        for part in rest:
            value = getattr(value, part)
        return value


def _owner_of(cls: type, name: str) -> type:
    for klass in cls.__mro__:
        if name in klass.__dict__.get("__annotations__", {}):
            return klass
    return cls


@functools.lru_cache(maxsize=None)
def _hints(cls: type) -> dict[str, Any]:
    hints: dict[str, Any] = {}
    for field in dataclasses.fields(cls):
        annotation = field.type
        if isinstance(annotation, str):
            module = inspect.getmodule(_owner_of(cls, field.name))
            namespace = dict(vars(module)) if module is not None else {}
            annotation = _AnnotationParser(annotation, namespace).parse()
        hints[field.name] = annotation
    return hints


def _encode(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _encode(item) for key, item in value.items()}
    return value


def _is_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, Model)


def _decode_tagged(members: list[type], value: Any, where: str) -> Any:
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected a JSON object")
    tag_key = members[0]._wire_tag_key
    tag = value.get(tag_key)
    for member in members:
        if member._wire_tag == tag:
            return member.from_dict(value)
    raise ValueError(f"{where}: unknown {tag_key} {tag!r}")


def _decode_union(args: tuple, value: Any, where: str) -> Any:
    members = [arg for arg in args if arg is not _NONE_TYPE]
    if value is None:
        if len(members) < len(args):
            return None
        raise ValueError(f"{where}: null is not allowed")
    if len(members) == 1:
        return _decode(members[0], value, where)
    if all(_is_model(m) and m._wire_tag is not None for m in members):
        return _decode_tagged(members, value, where)
    for member in members:
        try:
            return _decode(member, value, where)
        except (ValueError, TypeError):
            continue
    raise ValueError(f"{where}: {value!r} matches none of the accepted shapes")


def _decode(tp: Any, value: Any, where: str) -> Any:
    if tp is Any or isinstance(tp, TypeVar):
        return value
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        return _decode_union(get_args(tp), value, where)
    if value is None:
        raise ValueError(f"{where}: null is not allowed")
    if origin is list:
        if not isinstance(value, list):
            raise ValueError(f"{where}: expected a JSON array")
        (item_tp,) = get_args(tp) or (Any,)
        return [
            _decode(item_tp, item, f"{where}[{position}]")
            for position, item in enumerate(value)
        ]
    if origin is dict:
        if not isinstance(value, dict):
            raise ValueError(f"{where}: expected a JSON object")
        args = get_args(tp)
        value_tp = args[1] if args else Any
        return {
            key: _decode(value_tp, item, f"{where}.{key}") for key, item in value.items()
        }
    if _is_model(tp):
        if not isinstance(value, dict):
            raise ValueError(f"{where}: expected a JSON object")
        return tp.from_dict(value)
    if isinstance(tp, type) and issubclass(tp, Enum):
        try:
            return tp(value)
        except ValueError:
            raise ValueError(f"{where}: {value!r} is not a valid {tp.__name__}") from None
    if tp is bool:
        if not isinstance(value, bool):
            raise ValueError(f"{where}: expected a boolean")
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{where}: expected an integer")
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{where}: expected a number")
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise ValueError(f"{where}: expected a string")
        return value
    if isinstance(tp, type) and not isinstance(value, tp):
        raise ValueError(f"{where}: expected {tp.__name__}")
    return value


class Model:
    """Base for dataclasses that map to and from JSON objects."""

    _wire_tag = None
    _wire_tag_key = "type"
    _wire_extra = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this value."""
        out: dict[str, Any] = {}
        if self._wire_tag is not None:
            out[self._wire_tag_key] = self._wire_tag
        for field in dataclasses.fields(self):
            if field.name == self._wire_extra:
                continue
            value = getattr(self, field.name)
            if value is None and field.metadata.get(_OMIT, False):
                continue
            out[_key(field)] = _encode(value)
        if self._wire_extra is not None:
            out.update(_encode(getattr(self, self._wire_extra)))
        return out

    @classmethod
    def from_dict(cls, data):
        """Build a value from a decoded JSON object, checking field types."""
        if not isinstance(data, dict):
            raise ValueError(
                f"{cls.__name__}: expected a JSON object, got {type(data).__name__}"
            )
        hints = _hints(cls)
        known = {cls._wire_tag_key} if cls._wire_tag is not None else set()
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            if not field.init or field.name == cls._wire_extra:
                continue
            key = _key(field)
            known.add(key)
            if key in data:
                kwargs[field.name] = _decode(
                    hints[field.name], data[key], f"{cls.__name__}.{key}"
                )
            elif (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING
            ):
                raise ValueError(f"{cls.__name__}: missing field {key!r}")
        if cls._wire_extra is not None:
            kwargs[cls._wire_extra] = {
                key: value for key, value in data.items() if key not in known
            }
        return cls(**kwargs)

    def to_json(self) -> str:
        """Return the JSON text for this value."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text):
        """Parse JSON text into a value of this class."""
        return cls.from_dict(json.loads(text))