"""
Request Builder for the QFV TPI Client

Serializes request parameters into the query string the TPI REST endpoints
expect and composes the final request URL.
"""

import logging
from datetime import date, datetime
from typing import Any, Mapping, Optional
from urllib.parse import quote_plus, urlsplit, urlunsplit


class RequestBuilder:
    """Builds TPI request URLs from an endpoint name and parameters"""

    ENCODING = 'utf-8'
    DEFAULT_PORTS = {'http': 80, 'https': 443}

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def format_value(value: Any) -> str:
        """Convert a scalar parameter value to its wire text"""
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        return str(value)

    def build_query_string(self, parameters: Optional[Mapping[str, Any]]) -> str:
        """
        Serialize parameters as ``key=value`` pairs joined by ``&``

        Values are transcoded to UTF-8 and URL-encoded. Parameters whose value
        is None are left out; an empty mapping yields an empty string.
        """
        if not parameters:
            return ''

        pairs = []
        for key, value in parameters.items():
            if value is None:
                continue
            encoded = quote_plus(self.format_value(value), encoding=self.ENCODING)
            pairs.append(f"{quote_plus(str(key))}={encoded}")

        return '&'.join(pairs)

    def build_url(
        self,
        base_url: str,
        endpoint: str,
        parameters: Optional[Mapping[str, Any]] = None,
        port: Optional[int] = None
    ) -> str:
        """
        Build ``base_url/endpoint?query`` for a TPI method

        Args:
            base_url: Service root, e.g. https://host/wsTPI/service.svc/rest
            endpoint: Remote method name
            parameters: Request parameters, credentials included
            port: Port to address when the base URL does not name one

        Returns:
            Complete request URL
        """
        url = f"{self._apply_port(base_url.rstrip('/'), port)}/{endpoint.lstrip('/')}"

        query_string = self.build_query_string(parameters)
        if query_string:
            url = f"{url}?{query_string}"

        return url

    def _apply_port(self, base_url: str, port: Optional[int]) -> str:
        parts = urlsplit(base_url)
        if port is None or parts.port is not None or self.DEFAULT_PORTS.get(parts.scheme) == port:
            return base_url

        # no port in netloc at this point
        userinfo, at, host = parts.netloc.rpartition('@')
        netloc = f"{userinfo}{at}{host}:{port}"
        return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
