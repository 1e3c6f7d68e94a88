from __future__ import annotations
import json
import logging
from typing import Any, Callable, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic_core import PydanticSerializationError

from .errors import SerializationError

logger = logging.getLogger(__name__)

__all__ = [
    "SpecModel",
    "TraceModel",
    "LayoutModel",
    "Restyle",
    "Relayout",
    "dumps",
]


def dumps(obj: Any) -> str:
    """Compact JSON; NaN/inf are rejected rather than emitted as invalid JSON."""
    try:
        return json.dumps(obj, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


# ---------- Partial update deltas ----------

class Restyle(dict):
    """A single ``{wire_key: value}`` trace update, as sent to ``Plotly.restyle``."""


class Relayout(dict):
    """A single ``{wire_key: value}`` layout update, as sent to ``Plotly.relayout``."""


_ADAPTERS: Dict[Tuple[type, str, bool], TypeAdapter] = {}


def _adapter(cls: type, field: str, vector: bool) -> TypeAdapter:
    key = (cls, field, vector)
    if key not in _ADAPTERS:
        ann = cls.model_fields[field].annotation
        _ADAPTERS[key] = TypeAdapter(List[ann] if vector else ann)
    return _ADAPTERS[key]


def _dump_field(cls: type, field: str, value: Any, vector: bool) -> Any:
    ta = _adapter(cls, field, vector)
    validated = ta.validate_python(value)
    try:
        return ta.dump_python(validated, mode="json", by_alias=True, exclude_none=True)
    except PydanticSerializationError as e:
        raise SerializationError(f"{cls.__name__}.{field}: {e}") from e


# ---------- Base models ----------

class SpecModel(BaseModel):
    """Every chart record: optional fields, wire names as aliases, unset keys omitted."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        validate_assignment=True,
        ser_json_inf_nan="constants",
    )

    def to_dict(self) -> Dict[str, Any]:
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise SerializationError(str(e)) from e

    def to_json(self) -> str:
        return dumps(self.to_dict())

    def update(self, **fields: Any):
        """Validate and assign ``fields`` (python or wire names); returns self for chaining."""
        for key, value in fields.items():
            setattr(self, self._field_name(key), value)
        return self

    @classmethod
    def _field_name(cls, key: str) -> str:
        if key in cls.model_fields:
            return key
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        raise AttributeError(f"{cls.__name__} has no field '{key}'")

    @classmethod
    def wire_key(cls, field: str) -> str:
        info = cls.model_fields[cls._field_name(field)]
        return info.alias or field


def _restyle_vector(field: str) -> Callable:
    def modify(cls, values):
        return Restyle({cls.wire_key(field): _dump_field(cls, field, list(values), True)})
    modify.__doc__ = f"Restyle ``{field}`` with one value per targeted trace."
    return classmethod(modify)


def _restyle_scalar(field: str) -> Callable:
    def modify_all(cls, value):
        return Restyle({cls.wire_key(field): _dump_field(cls, field, value, False)})
    modify_all.__doc__ = f"Restyle ``{field}`` with the same value on every targeted trace."
    return classmethod(modify_all)


def _relayout(field: str) -> Callable:
    def modify(cls, value):
        return Relayout({cls.wire_key(field): _dump_field(cls, field, value, False)})
    modify.__doc__ = f"Relayout ``{field}``."
    return classmethod(modify)


class TraceModel(SpecModel):
    """Base for chart kinds. Subclasses get ``modify_<field>``/``modify_all_<field>`` restyle builders."""

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for name in cls.model_fields:
            if name == "type":
                continue
            if f"modify_{name}" not in cls.__dict__:
                setattr(cls, f"modify_{name}", _restyle_vector(name))
            if f"modify_all_{name}" not in cls.__dict__:
                setattr(cls, f"modify_all_{name}", _restyle_scalar(name))

    def trace_type(self) -> str:
        t = getattr(self, "type")
        return getattr(t, "value", t)


class LayoutModel(SpecModel):
    """Base for the top-level layout. Subclasses get ``modify_<field>`` relayout builders."""

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for name, info in cls.model_fields.items():
            if info.exclude:
                continue
            if f"modify_{name}" not in cls.__dict__:
                setattr(cls, f"modify_{name}", _relayout(name))
