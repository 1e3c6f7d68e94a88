from __future__ import annotations
from enum import Enum
from typing import Optional


__all__ = [
    "ChartSpecError",
    "SerializationError",
    "ControlErrorKind",
    "ControlBuilderError",
    "SubplotError",
    "ExportError",
    "ConfigError",
]


# ---------- Errors ----------

class ChartSpecError(Exception): ...
class SerializationError(ChartSpecError): ...
class SubplotError(ChartSpecError): ...
class ExportError(ChartSpecError): ...
class ConfigError(ChartSpecError): ...


class ControlErrorKind(str, Enum):
    restyle_serialization_error = "restyle_serialization_error"
    relayout_serialization_error = "relayout_serialization_error"
    value_serialization_error = "value_serialization_error"
    invalid_restyle_object = "invalid_restyle_object"
    invalid_relayout_object = "invalid_relayout_object"
    animation_serialization_error = "animation_serialization_error"


_KIND_MESSAGES = {
    ControlErrorKind.restyle_serialization_error: "failed to serialize restyle",
    ControlErrorKind.relayout_serialization_error: "failed to serialize relayout",
    ControlErrorKind.value_serialization_error: "failed to serialize value",
    ControlErrorKind.invalid_restyle_object: "invalid restyle object: expected object",
    ControlErrorKind.invalid_relayout_object: "invalid relayout object: expected object",
    ControlErrorKind.animation_serialization_error: "failed to serialize animation",
}


class ControlBuilderError(ChartSpecError):
    """Raised by ButtonBuilder/SliderStepBuilder.build() for the first failed push."""

    def __init__(self, kind: ControlErrorKind, detail: Optional[str] = None):
        self.kind = kind
        self.detail = detail
        msg = _KIND_MESSAGES[kind]
        if detail:
            msg = f"{msg} `{detail}`"
        super().__init__(msg)
