"""Parameter metadata and resolved URI variables.

``ParameterDescriptor`` is created once per exchange-method parameter at
registration time and never changes afterwards. ``ResolvedVariable`` is the
per-invocation output of a resolver.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, get_args, get_origin

from pydantic import BaseModel, ConfigDict

from http_exchange.errors import illegal_argument
from http_exchange.models.optional import OptionalValue


PATH_VARIABLE_LABEL = "path variable"


class ParameterDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # None when the parameter name is not available at registration time
    declared_name: Optional[str] = None
    override_name: Optional[str] = None
    required: bool = True
    declared_type: Any = object
    label: str = PATH_VARIABLE_LABEL

    def resolved_name(self) -> str:
        """Return the override name when non-empty, else the declared name."""
        if self.override_name:
            return self.override_name
        if self.declared_name:
            return self.declared_name
        raise illegal_argument(
            "missing_name",
            f"Name for {self.label} argument of type [{_type_name(self.declared_type)}] not specified, "
            "and parameter name information not available either",
        )

    def is_mapping(self) -> bool:
        # OptionalValue[Mapping[...]] is a mapping parameter once unwrapped
        nested = self.nested_type()
        origin = get_origin(nested) or nested
        return isinstance(origin, type) and issubclass(origin, Mapping)

    def nested_type(self) -> Any:
        if get_origin(self.declared_type) is OptionalValue:
            args = get_args(self.declared_type)
            return args[0] if args else object
        if self.declared_type is OptionalValue:
            return object
        return self.declared_type


class ResolvedVariable(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or str(tp)


__all__ = ["PATH_VARIABLE_LABEL", "ParameterDescriptor", "ResolvedVariable"]
