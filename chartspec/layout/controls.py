from __future__ import annotations
import logging
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..errors import ControlBuilderError, ControlErrorKind

logger = logging.getLogger(__name__)


class ControlMethod(str, Enum):
    restyle = "restyle"
    relayout = "relayout"
    animate = "animate"
    update = "update"
    skip = "skip"


def method_and_args(restyles: Dict[str, Any], relayouts: Dict[str, Any]) -> Tuple[ControlMethod, Any]:
    if not restyles and not relayouts:
        return ControlMethod.skip, None
    if restyles and not relayouts:
        return ControlMethod.restyle, [restyles]
    if relayouts and not restyles:
        return ControlMethod.relayout, [relayouts]
    return ControlMethod.update, [restyles, relayouts]


def _as_object(delta: Any, serialization_kind: ControlErrorKind, object_kind: ControlErrorKind) -> Dict[str, Any]:
    try:
        value = to_jsonable_python(delta)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise ControlBuilderError(serialization_kind, str(e)) from e
    if not isinstance(value, dict):
        raise ControlBuilderError(object_kind, repr(value))
    return value


class DeltaCollector:
    """Merges pushed restyle/relayout deltas and latches the first failure."""

    def __init__(self):
        self.restyles: Dict[str, Any] = {}
        self.relayouts: Dict[str, Any] = {}
        self.error: Optional[ControlBuilderError] = None

    def latch(self, error: ControlBuilderError) -> None:
        if self.error is None:
            logger.debug("control builder latched %s", error.kind.value)
            self.error = error

    def push_restyle(self, delta: Any) -> None:
        if self.error is not None:
            return
        try:
            self.restyles.update(_as_object(
                delta,
                ControlErrorKind.restyle_serialization_error,
                ControlErrorKind.invalid_restyle_object,
            ))
        except ControlBuilderError as e:
            self.latch(e)

    def push_relayout(self, delta: Any) -> None:
        if self.error is not None:
            return
        try:
            self.relayouts.update(_as_object(
                delta,
                ControlErrorKind.relayout_serialization_error,
                ControlErrorKind.invalid_relayout_object,
            ))
        except ControlBuilderError as e:
            self.latch(e)

    def raise_latched(self) -> None:
        if self.error is not None:
            raise self.error
