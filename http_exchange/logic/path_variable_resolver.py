"""Path-variable argument resolution.

Maps one exchange-method argument onto named URI template variables. A
scalar parameter contributes at most one variable under its resolved name; a
mapping parameter contributes one variable per entry, keyed by the entry key.

Entries of a mapping argument are always required, even on a parameter
that is not; a ``None`` mapping argument contributes nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from http_exchange.errors import illegal_argument
from http_exchange.logic.conversion import ConversionService, DefaultConversionService
from http_exchange.models.optional import OptionalValue
from http_exchange.models.parameter import PATH_VARIABLE_LABEL, ParameterDescriptor, ResolvedVariable
from http_exchange.models.request_values import RequestValuesBuilder


logger = logging.getLogger(__name__)

_MISSING = object()


class PathVariableResolver:
    def __init__(self, conversion_service: Optional[ConversionService] = None) -> None:
        self.conversion_service = conversion_service or DefaultConversionService()

    def supports(self, descriptor: ParameterDescriptor) -> bool:
        return descriptor.label == PATH_VARIABLE_LABEL

    def resolve(self, descriptor: ParameterDescriptor, runtime_value: Any) -> List[ResolvedVariable]:
        """Resolve one argument into zero or more URI variables.

        Raises ``IllegalArgumentError`` for a required value that is ``None``
        or an empty ``OptionalValue``, for any such value inside a mapping
        argument, and for a parameter whose name cannot be determined.
        """
        if descriptor.is_mapping():
            return self._resolve_mapping(descriptor, runtime_value)

        name = descriptor.resolved_name()
        value = self._resolve_value(name, runtime_value, descriptor.required, descriptor.nested_type(), descriptor.label)
        if value is _MISSING:
            logger.debug("path_variable.skipped name=%s", name)
            return []
        logger.debug("path_variable.resolved name=%s", name)
        return [ResolvedVariable(name=name, value=value)]

    def resolve_into(self, descriptor: ParameterDescriptor, runtime_value: Any, builder: RequestValuesBuilder) -> bool:
        """Merge resolved variables into ``builder``; False if not a path variable."""
        if not self.supports(descriptor):
            return False
        for variable in self.resolve(descriptor, runtime_value):
            builder.set_uri_variable(variable.name, variable.value)
        return True

    def _resolve_mapping(self, descriptor: ParameterDescriptor, runtime_value: Any) -> List[ResolvedVariable]:
        if isinstance(runtime_value, OptionalValue):
            if not runtime_value.is_present():
                if descriptor.required:
                    raise illegal_argument("missing_value", f"Missing {descriptor.label} mapping argument")
                return []
            runtime_value = runtime_value.get()
        if runtime_value is None:
            return []
        if not isinstance(runtime_value, Mapping):
            raise illegal_argument(
                "not_a_mapping",
                f"Expected a mapping for {descriptor.label} argument, got {type(runtime_value).__name__}",
            )

        resolved: List[ResolvedVariable] = []
        for key, entry in runtime_value.items():
            name = str(key)
            value = self._resolve_value(name, entry, True, None, descriptor.label)
            resolved.append(ResolvedVariable(name=name, value=value))
        logger.debug("path_variable.resolved_mapping names=%s", [v.name for v in resolved])
        return resolved

    def _resolve_value(self, name: str, value: Any, required: bool, source_type: Any, label: str) -> Any:
        if isinstance(value, OptionalValue):
            value = value.or_else(None)
        if value is None:
            if required:
                raise illegal_argument("missing_value", f"Missing {label} value '{name}'")
            return _MISSING
        if type(value) is str:
            return value
        converted = self.conversion_service.convert(value, source_type)
        if converted is None:
            if required:
                raise illegal_argument("missing_value", f"Missing {label} value '{name}'")
            return _MISSING
        return converted


__all__ = ["PathVariableResolver"]
