"""Exchange-method registration and invocation.

Methods are registered explicitly with an ``HttpExchange`` and the list of
parameter descriptors built at registration time. Invoking a method runs each
argument through the resolver chain, builds ``HttpRequestValues`` and hands
them to the injected ``HttpClientAdapter``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

from http_exchange.errors import ERROR_CODES, IllegalStateError, illegal_argument
from http_exchange.logic.conversion import ConversionService
from http_exchange.logic.path_variable_resolver import PathVariableResolver
from http_exchange.models.parameter import ParameterDescriptor
from http_exchange.models.request_values import HttpRequestValues, RequestValuesBuilder


logger = logging.getLogger(__name__)


class ArgumentResolver(Protocol):
    def resolve_into(self, descriptor: ParameterDescriptor, runtime_value: Any, builder: RequestValuesBuilder) -> bool: ...


class HttpClientAdapter(Protocol):
    def exchange(self, values: HttpRequestValues) -> Any: ...


@dataclass(frozen=True)
class HttpExchange:
    method: str = "GET"
    url: str = ""


def default_resolvers(conversion_service: Optional[ConversionService] = None) -> List[ArgumentResolver]:
    return [PathVariableResolver(conversion_service)]


class HttpServiceMethod:
    def __init__(
        self,
        name: str,
        exchange: HttpExchange,
        parameters: Sequence[ParameterDescriptor],
        resolvers: Optional[Sequence[ArgumentResolver]] = None,
    ) -> None:
        self.name = name
        self.exchange = exchange
        self.parameters: Tuple[ParameterDescriptor, ...] = tuple(parameters)
        self.resolvers: Tuple[ArgumentResolver, ...] = tuple(resolvers if resolvers is not None else default_resolvers())

    def build_request(self, *args: Any) -> HttpRequestValues:
        if len(args) != len(self.parameters):
            raise illegal_argument(
                "arity_mismatch",
                f"{self.name}() expects {len(self.parameters)} argument(s), got {len(args)}",
            )
        builder = RequestValuesBuilder(self.exchange.method, self.exchange.url)
        for index, (descriptor, argument) in enumerate(zip(self.parameters, args)):
            if not any(resolver.resolve_into(descriptor, argument, builder) for resolver in self.resolvers):
                logger.info("error_handler.handle", extra={"code": ERROR_CODES["unresolved_parameter"]})
                raise IllegalStateError(
                    f"Could not resolve parameter [{index}] of {self.name}(): no suitable resolver for {descriptor.label}"
                )
        values = builder.build()
        logger.debug("service_method.request_built method=%s variables=%s", self.name, sorted(values.uri_variables))
        return values

    def invoke(self, adapter: HttpClientAdapter, *args: Any) -> Any:
        return adapter.exchange(self.build_request(*args))


Registration = Tuple[HttpExchange, Sequence[ParameterDescriptor]]


class HttpServiceProxy:
    """Attribute-based facade over a set of registered exchange methods."""

    def __init__(self, adapter: HttpClientAdapter, methods: Mapping[str, HttpServiceMethod]) -> None:
        self._adapter = adapter
        self._methods = dict(methods)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        methods = self.__dict__.get("_methods") or {}
        if name not in methods:
            raise AttributeError(f"{type(self).__name__} has no exchange method {name!r}")
        method = methods[name]

        def _call(*args: Any) -> Any:
            return method.invoke(self._adapter, *args)

        _call.__name__ = name
        return _call

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._methods))


class HttpServiceProxyFactory:
    def __init__(self, adapter: HttpClientAdapter, resolvers: Optional[Sequence[ArgumentResolver]] = None) -> None:
        self.adapter = adapter
        self.resolvers: List[ArgumentResolver] = list(resolvers) if resolvers is not None else default_resolvers()

    def create_service(self, registrations: Mapping[str, Registration]) -> HttpServiceProxy:
        methods: Dict[str, HttpServiceMethod] = {
            name: HttpServiceMethod(name, exchange, parameters, self.resolvers)
            for name, (exchange, parameters) in registrations.items()
        }
        logger.info("service_proxy.created methods=%d", len(methods))
        return HttpServiceProxy(self.adapter, methods)


__all__ = [
    "ArgumentResolver",
    "HttpClientAdapter",
    "HttpExchange",
    "HttpServiceMethod",
    "HttpServiceProxy",
    "HttpServiceProxyFactory",
    "Registration",
    "default_resolvers",
]
