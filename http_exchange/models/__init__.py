"""Value types shared by resolvers and the request-building context."""

from __future__ import annotations

from http_exchange.models.optional import OptionalValue
from http_exchange.models.parameter import ParameterDescriptor, ResolvedVariable
from http_exchange.models.request_values import HttpRequestValues, RequestValuesBuilder

__all__ = [
    "OptionalValue",
    "ParameterDescriptor",
    "ResolvedVariable",
    "HttpRequestValues",
    "RequestValuesBuilder",
]
