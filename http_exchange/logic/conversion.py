"""Type-driven rendering of argument values as request strings.

Converters are keyed by source type and looked up along the MRO, first of
the runtime value's type and then of the declared type, so a parameter
declared as ``object`` still renders a ``bool`` as ``"true"``.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol, get_origin
from uuid import UUID

from http_exchange.errors import illegal_argument


logger = logging.getLogger(__name__)

Converter = Callable[[Any], str]


class ConversionService(Protocol):
    def convert(self, value: Any, source_type: Any = None) -> Optional[str]: ...


def _bool_to_str(value: Any) -> str:
    return "true" if value else "false"


def _bytes_to_str(value: Any) -> str:
    try:
        return bytes(value).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise illegal_argument("not_convertible", f"Cannot render bytes argument as UTF-8 text: {exc}") from exc


def _isoformat(value: Any) -> str:
    return value.isoformat()


class DefaultConversionService:
    def __init__(self) -> None:
        self._converters: Dict[type, Converter] = {}
        self.add_converter(str, str)
        self.add_converter(int, str)
        self.add_converter(bool, _bool_to_str)
        self.add_converter(float, str)
        self.add_converter(Decimal, str)
        self.add_converter(Enum, lambda v: v.name)
        self.add_converter(date, _isoformat)
        self.add_converter(datetime, _isoformat)
        self.add_converter(time, _isoformat)
        self.add_converter(UUID, str)
        self.add_converter(bytes, _bytes_to_str)
        self.add_converter(bytearray, _bytes_to_str)

    def add_converter(self, source_type: type, converter: Converter) -> None:
        """Register ``converter`` for ``source_type`` and its subclasses."""
        self._converters[source_type] = converter

    def _lookup(self, tp: Any) -> Optional[Converter]:
        tp = get_origin(tp) or tp
        if not isinstance(tp, type):
            return None
        # Enum members skip their mixin bases (str, int) so they render by name
        enum_only = issubclass(tp, Enum)
        for klass in tp.__mro__:
            if enum_only and not issubclass(klass, Enum):
                continue
            if klass in self._converters:
                return self._converters[klass]
        return None

    def convert(self, value: Any, source_type: Any = None) -> Optional[str]:
        if value is None:
            return None
        if type(value) is str:
            return value
        converter = self._lookup(type(value))
        if converter is None and source_type is not None:
            converter = self._lookup(source_type)
        if converter is None:
            logger.debug("conversion.fallback type=%s", type(value).__name__)
            return str(value)
        return converter(value)


__all__ = ["ConversionService", "Converter", "DefaultConversionService"]
