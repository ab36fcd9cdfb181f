"""Functional test fixtures for http-exchange.

Provides a recording client adapter that captures the request values of the
last exchange, and a service registered with the path-variable shapes the
resolver must handle (named, aliased, optional, not-required and mapping).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import pytest

from http_exchange import (
    DefaultConversionService,
    HttpExchange,
    HttpRequestValues,
    HttpServiceProxyFactory,
    OptionalValue,
    PathVariable,
    PathVariableResolver,
)


class RecordingClientAdapter:
    """Client adapter that records request values instead of sending them."""

    def __init__(self) -> None:
        self.request_values: Optional[HttpRequestValues] = None
        self.calls = 0

    def exchange(self, values: HttpRequestValues) -> None:
        self.calls += 1
        self.request_values = values

    @property
    def uri_variables(self) -> Dict[str, str]:
        assert self.request_values is not None, "no exchange recorded"
        return dict(self.request_values.uri_variables)


def _registrations() -> Dict[str, Any]:
    exchange = HttpExchange("GET", "/employees/{id}")
    return {
        "execute": (exchange, [PathVariable().describe("id", str)]),
        "execute_not_required": (exchange, [PathVariable(required=False).describe("id", str)]),
        "execute_optional": (exchange, [PathVariable().describe("id", OptionalValue[bool])]),
        "execute_optional_not_required": (exchange, [PathVariable(required=False).describe("id", OptionalValue[str])]),
        "execute_named_with_value": (exchange, [PathVariable(name="test", value="id").describe("employee_id", str)]),
        "execute_named": (exchange, [PathVariable(name="id").describe("employee_id", str)]),
        "execute_value_named": (exchange, [PathVariable("id").describe("employee_id", str)]),
        "execute_object": (exchange, [PathVariable().describe("id", object)]),
        "execute_boolean": (exchange, [PathVariable().describe("id", bool)]),
        "execute_value_map": (exchange, [PathVariable().describe("map", Mapping[str, str])]),
        "execute_optional_value_map": (
            exchange,
            [PathVariable().describe("map", Mapping[str, OptionalValue[str]])],
        ),
    }


@pytest.fixture
def client_adapter() -> RecordingClientAdapter:
    return RecordingClientAdapter()


@pytest.fixture
def service(client_adapter: RecordingClientAdapter):
    factory = HttpServiceProxyFactory(client_adapter, [PathVariableResolver(DefaultConversionService())])
    return factory.create_service(_registrations())


@pytest.fixture
def http_exchange_log_records():
    """Capture records emitted by ``http_exchange.*`` loggers."""

    class _ListHandler(logging.Handler):
        def __init__(self) -> None:
            super().__init__(level=logging.DEBUG)
            self.records: list[logging.LogRecord] = []

        def emit(self, record: logging.LogRecord) -> None:
            self.records.append(record)

    handler = _ListHandler()
    logger = logging.getLogger("http_exchange")
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)
