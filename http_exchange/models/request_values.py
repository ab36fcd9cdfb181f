"""Request-building context for one outgoing exchange.

``RequestValuesBuilder`` is owned by a single in-flight invocation and
accumulates URI variables; ``HttpRequestValues`` is its frozen result.
"""

from __future__ import annotations

import logging
import re
from typing import Dict
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from http_exchange.errors import illegal_argument


logger = logging.getLogger(__name__)

_TEMPLATE_VARIABLE = re.compile(r"\{([^{}/]+)\}")


class HttpRequestValues(BaseModel):
    model_config = ConfigDict(frozen=True)

    http_method: str = "GET"
    uri_template: str = ""
    uri_variables: Dict[str, str] = Field(default_factory=dict)

    def template_variable_names(self) -> list[str]:
        return _TEMPLATE_VARIABLE.findall(self.uri_template)

    def expand_uri(self) -> str:
        """Substitute every ``{name}`` in the template with its encoded value.

        Values are percent-encoded as a single path segment, so ``/`` inside
        a value does not introduce a new segment.
        """

        def _substitute(match: re.Match) -> str:
            name = match.group(1)
            if name not in self.uri_variables:
                raise illegal_argument(
                    "unexpanded_variable",
                    f"No value for URI template variable '{name}' in '{self.uri_template}'",
                )
            return quote(self.uri_variables[name], safe="")

        return _TEMPLATE_VARIABLE.sub(_substitute, self.uri_template)


class RequestValuesBuilder:
    def __init__(self, http_method: str = "GET", uri_template: str = "") -> None:
        self.http_method = http_method.upper()
        self.uri_template = uri_template
        self._uri_variables: Dict[str, str] = {}

    def set_uri_variable(self, name: str, value: str) -> "RequestValuesBuilder":
        if name in self._uri_variables:
            logger.debug("uri_variable.overwritten name=%s", name)
        self._uri_variables[name] = value
        return self

    @property
    def uri_variables(self) -> Dict[str, str]:
        return dict(self._uri_variables)

    def build(self) -> HttpRequestValues:
        return HttpRequestValues(
            http_method=self.http_method,
            uri_template=self.uri_template,
            uri_variables=dict(self._uri_variables),
        )


__all__ = ["HttpRequestValues", "RequestValuesBuilder"]
