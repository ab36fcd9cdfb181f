"""Path-variable argument resolution for declarative HTTP client services.

An exchange method is registered with its URI template and parameter
descriptors; invoking it resolves each argument into request values through
``PathVariableResolver``. Transport is left to the injected client adapter.
"""

from __future__ import annotations

from http_exchange.annotations import PathVariable
from http_exchange.errors import IllegalArgumentError, IllegalStateError
from http_exchange.logic.conversion import ConversionService, DefaultConversionService
from http_exchange.logic.path_variable_resolver import PathVariableResolver
from http_exchange.logic.service_method import (
    HttpClientAdapter,
    HttpExchange,
    HttpServiceMethod,
    HttpServiceProxyFactory,
)
from http_exchange.models import (
    HttpRequestValues,
    OptionalValue,
    ParameterDescriptor,
    RequestValuesBuilder,
    ResolvedVariable,
)

__all__ = [
    "PathVariable",
    "IllegalArgumentError",
    "IllegalStateError",
    "ConversionService",
    "DefaultConversionService",
    "PathVariableResolver",
    "HttpClientAdapter",
    "HttpExchange",
    "HttpServiceMethod",
    "HttpServiceProxyFactory",
    "HttpRequestValues",
    "OptionalValue",
    "ParameterDescriptor",
    "RequestValuesBuilder",
    "ResolvedVariable",
]
