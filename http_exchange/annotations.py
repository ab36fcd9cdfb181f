"""Declarative markers for exchange-method parameters.

``PathVariable`` carries the same attributes as the annotation it models and
turns them into a ``ParameterDescriptor`` when a method is registered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from http_exchange.models.parameter import PATH_VARIABLE_LABEL, ParameterDescriptor


@dataclass(frozen=True)
class PathVariable:
    value: str = ""
    name: str = ""
    required: bool = True

    @property
    def override_name(self) -> Optional[str]:
        # `value` is the shorthand alias and takes precedence over `name`
        return self.value or self.name or None

    def describe(self, declared_name: Optional[str], declared_type: Any = object) -> ParameterDescriptor:
        return ParameterDescriptor(
            declared_name=declared_name,
            override_name=self.override_name,
            required=self.required,
            declared_type=declared_type,
            label=PATH_VARIABLE_LABEL,
        )


__all__ = ["PathVariable"]
