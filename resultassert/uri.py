"""
URI 工具與巢狀 URI 斷言

is_well_formed_uri() 判斷字串是否為合法的絕對或相對 URI。
UriAssertions 讓 location 斷言可以逐一檢查 scheme、host、path、query。

用法：
    (expect_result(result).created()
        .at_location_matching(lambda uri: uri
            .with_host("api.example.com")
            .and_also.with_path("/items/5")
            .with_query_value("expand", "true")))
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlsplit

from resultassert.reporter import FailureContext, format_value, report

# RFC 3986 允許出現在 URI 的字元，% 後面必須是兩位十六進位
_URI_PATTERN = re.compile(
    r"^(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+$"
)


def is_well_formed_uri(value: object) -> bool:
    """絕對 URI 與相對 URI 都接受；空字串、空白、非法跳脫都不合法"""
    if not isinstance(value, str) or not _URI_PATTERN.match(value):
        return False
    try:
        parts = urlsplit(value)
        parts.port
    except ValueError:
        return False
    # scheme 之後以 "//" 開頭代表有 authority，host 不可為空
    rest = value[len(parts.scheme) + 1:] if parts.scheme else value
    if rest.startswith("//"):
        return bool(parts.hostname)
    return True


class UriAssertions:
    """針對實際 location 的巢狀斷言，任何失敗都以外層結果的名義回報"""

    def __init__(self, location: str, context: FailureContext, subject: str):
        self._location = location
        self._parts = urlsplit(location)
        self._context = context
        self._subject = subject

    @property
    def and_also(self) -> UriAssertions:
        return self

    @property
    def location(self) -> str:
        return self._location

    def with_scheme(self, scheme: str) -> UriAssertions:
        return self._component("scheme", scheme, self._parts.scheme)

    def with_host(self, host: str) -> UriAssertions:
        return self._component("host", host, self._parts.hostname)

    def with_port(self, port: int) -> UriAssertions:
        return self._component("port", port, self._parts.port)

    def with_path(self, path: str) -> UriAssertions:
        return self._component("path", path, self._parts.path)

    def with_query(self, query: str) -> UriAssertions:
        return self._component("query", query.lstrip("?"), self._parts.query)

    def with_fragment(self, fragment: str) -> UriAssertions:
        return self._component("fragment", fragment.lstrip("#"), self._parts.fragment)

    def with_query_value(self, key: str, value: str) -> UriAssertions:
        values = parse_qs(self._parts.query, keep_blank_values=True).get(key)
        if values is None:
            report(
                self._context,
                self._subject,
                f"to have query parameter {format_value(key)}",
                "such could not be found",
            )
        if value not in values:
            report(
                self._context,
                self._subject,
                f"to have query parameter {format_value(key)} "
                f"with value {format_value(value)}",
                f"in fact found {', '.join(format_value(v) for v in values)}",
            )
        return self

    def _component(self, name: str, expected, actual) -> UriAssertions:
        if actual != expected:
            report(
                self._context,
                self._subject,
                f"to have {format_value(expected)} {name}",
                f"in fact found {format_value(actual)}",
            )
        return self
