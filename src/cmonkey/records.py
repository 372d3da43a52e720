"""
Record Machinery
================

Shared plumbing for the JSON record types of this package.

A record is a pydantic model whose fields are all optional and whose unknown
keys are kept (``extra="allow"``). :class:`JsonRecord` provides:

- an additional-properties bag backed by the model's extra values,
- encoding to plain JSON values in ``JSON_PROPERTY_ORDER`` with absent
  declared fields omitted, followed by the bag,
- decoding through pydantic validation, with unknown keys routed into the bag,
- a deterministic ``Name [field=value, ...]`` debug string.

The :func:`json_record` decorator attaches ``get_<field>``, ``set_<field>``
and fluent ``with_<field>`` accessors for every declared field. Assignment is
not validated: only decoding checks wire types.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, ClassVar, Dict, Tuple

from pydantic import AllowInfNan, BaseModel, BeforeValidator, ConfigDict, model_serializer
from pydantic.fields import FieldInfo


def _finite_number(value: Any) -> float:
    """Accept a JSON number that fits a finite float; booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError as e:
        raise ValueError("integer too large to convert to float") from e
    if not math.isfinite(number):
        raise ValueError("number must be finite")
    return number


WireFloat = Annotated[float, BeforeValidator(_finite_number), AllowInfNan(False)]


def to_text(value: Any) -> str:
    """Render a value for debug strings: ``null``, ``[a, b]``, ``{k=v}``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, JsonRecord):
        return value.to_string()
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_text(item) for item in value) + "]"
    if isinstance(value, dict):
        return "{" + ", ".join(f"{key}={to_text(item)}" for key, item in value.items()) + "}"
    return str(value)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class JsonRecord(BaseModel):
    """Base model implementing the JSON record contract.

    Subclasses declare optional fields and ``JSON_PROPERTY_ORDER``, the
    explicit order in which JSON keys are encoded.
    """

    model_config = ConfigDict(extra="allow", allow_inf_nan=False)

    JSON_PROPERTY_ORDER: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def json_fields(cls) -> Dict[str, FieldInfo]:
        """Return the declared fields keyed by their JSON key."""
        return dict(cls.model_fields)

    def get_additional_properties(self) -> Dict[str, Any]:
        """Return the live bag of properties outside the fixed schema."""
        return self.__pydantic_extra__

    def set_additional_property(self, name: str, value: Any) -> None:
        """Insert or overwrite an entry of the bag."""
        if name in self.json_fields():
            raise ValueError(f"'{name}' is a declared field of {type(self).__name__}, use its setter instead")
        self.__pydantic_extra__[name] = value

    @model_serializer(mode="wrap")
    def _encode_in_order(self, handler) -> Dict[str, Any]:
        dumped = handler(self)
        declared = self.json_fields()
        encoded = {key: dumped[key] for key in self.JSON_PROPERTY_ORDER if dumped.get(key) is not None}
        for name in self.__pydantic_extra__ or {}:
            if name not in declared and name in dumped:
                encoded[name] = dumped[name]
        return encoded

    def to_dict(self) -> Dict[str, Any]:
        """Encode to JSON values: declared keys in order, then the bag."""
        return self.model_dump()

    def to_json(self, **kwargs) -> str:
        """Encode to a JSON string; keyword arguments go to ``model_dump_json``."""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Decode from JSON values, routing unknown keys into the bag."""
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str):
        """Decode from a JSON string."""
        return cls.model_validate_json(text)

    def to_string(self) -> str:
        """Return ``Name [field=value, ..., additionalProperties={...}]``."""
        parts = [f"{_camel(key)}={to_text(getattr(self, key))}" for key in self.JSON_PROPERTY_ORDER]
        parts.append(f"additionalProperties={to_text(self.get_additional_properties())}")
        return f"{type(self).__name__} [" + ", ".join(parts) + "]"

    def __str__(self) -> str:
        return self.to_string()


def _attach_accessors(cls: type, name: str) -> None:
    def getter(self):
        return getattr(self, name)

    def setter(self, value):
        setattr(self, name, value)

    def fluent(self, value):
        setattr(self, name, value)
        return self

    for prefix, method, doc in (
        ("get_", getter, f"Return ``{name}``."),
        ("set_", setter, f"Set ``{name}``."),
        ("with_", fluent, f"Set ``{name}`` and return this record."),
    ):
        method_name = prefix + name
        if method_name in cls.__dict__:
            continue
        method.__name__ = method_name
        method.__qualname__ = f"{cls.__qualname__}.{method_name}"
        method.__doc__ = doc
        setattr(cls, method_name, method)


def json_record(cls):
    """Class decorator adding accessors to a :class:`JsonRecord` model."""
    declared = cls.json_fields()
    if set(declared) != set(cls.JSON_PROPERTY_ORDER) or len(declared) != len(cls.JSON_PROPERTY_ORDER):
        raise TypeError(
            f"{cls.__name__}.JSON_PROPERTY_ORDER {cls.JSON_PROPERTY_ORDER} does not match fields {tuple(declared)}"
        )
    for name in declared:
        _attach_accessors(cls, name)
    return cls
