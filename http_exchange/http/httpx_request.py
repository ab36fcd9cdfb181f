"""Hand-off of built request values to httpx.

Builds an ``httpx.Request`` from ``HttpRequestValues``; sending it is the
caller's business.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from http_exchange.models.request_values import HttpRequestValues


logger = logging.getLogger(__name__)


def build_httpx_request(values: HttpRequestValues, base_url: Optional[str] = None) -> httpx.Request:
    """Join ``base_url`` with the expanded URI template and wrap it in a request.

    When ``base_url`` is omitted the configured ``base_url`` is used.
    """
    if base_url is None:
        from http_exchange.config import load_config

        base_url = load_config().base_url
    path = values.expand_uri()
    url = httpx.URL(base_url.rstrip("/") + "/").join(path.lstrip("/"))
    logger.debug("httpx_request.built method=%s url=%s", values.http_method, url)
    return httpx.Request(values.http_method, url)


__all__ = ["build_httpx_request"]
