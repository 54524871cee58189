"""
Builder Chain: 可鏈式呼叫的結果斷言

每個 family builder 由數個能力 mixin 組成（location、action、route、
file ...），每個斷言方法都會：
    1. 從原始結果重新窄化成需要的 variant
    2. 交給對應的 validator 比對
    3. 回傳同一個 builder，可以直接串下一個斷言或用 .and_also 串接

用法：
    (expect_result(result, ctx).created()
        .at_action("GetItem")
        .and_also
        .at_controller("ItemsController")
        .containing_route_value("id", 5))
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Self

from resultassert.exceptions import ResultAssertionError
from resultassert.narrowing import Variant, narrow
from resultassert.reporter import FailureContext
from resultassert.results import (
    ActionRouteResult,
    ByteContentFileResult,
    CreatedResultBase,
    FileResultBase,
    LocationResult,
    NamedRouteResult,
    PhysicalFileResult,
    RedirectResult,
    RedirectResultBase,
    RedirectToActionResult,
    RedirectToRouteResult,
    StreamFileResult,
    VirtualFileResult,
)
from resultassert.uri import UriAssertions
from resultassert import validators
from utils.logger import logger


def assertion(method: Callable) -> Callable:
    """
    裝飾器：斷言方法的共通包裝。

    - 失敗時整個呼叫中斷（validator 不會繼續往下檢查）
    - soft 模式下把失敗交給 SoftAssert 記錄，並回傳 builder 讓串接繼續
    """
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            result = method(self, *args, **kwargs)
        except ResultAssertionError as error:
            if self._soft is None:
                raise
            self._soft.record(error)
            return self
        logger.debug(f"{self._subject}: {method.__name__} 通過")
        return result
    return wrapper


class BaseResultAssertions:
    """所有 family builder 的共同狀態：原始結果、失敗 context、soft 記錄器"""

    result_kind = "action"
    family: type = object

    def __init__(self, result: Any, context: FailureContext, soft=None):
        self._result = result
        self._context = context
        self._soft = soft

    @property
    def and_also(self) -> Self:
        """串接用，回傳同一個 builder"""
        return self

    @property
    def result(self) -> Any:
        return self._result

    @property
    def context(self) -> FailureContext:
        return self._context

    @property
    def _subject(self) -> str:
        return f"{self.result_kind} result"

    def _narrow(self, variant: Variant, label: str) -> Any:
        return narrow(self._result, variant, self._context, self.result_kind, label)


# ── 能力 mixin ──

class LocationAssertions:
    _location_variants: tuple[type, ...] = ()

    @assertion
    def at_location(self, location: str) -> Self:
        """location 必須完全等於預期值（預期值必須是合法 URI）"""
        narrowed = self._narrow(self._location_variants, "location")
        validators.validate_location(self._context, self._subject, narrowed.location, location)
        return self

    @assertion
    def at_location_passing(self, predicate: Callable[[str], bool]) -> Self:
        narrowed = self._narrow(self._location_variants, "location")
        validators.validate_location_predicate(
            self._context, self._subject, narrowed.location, predicate
        )
        return self

    @assertion
    def at_location_matching(self, uri_builder: Callable[[UriAssertions], Any]) -> Self:
        """用巢狀 UriAssertions 分別檢查 scheme / host / path / query"""
        narrowed = self._narrow(self._location_variants, "location")
        validators.validate_location_builder(
            self._context, self._subject, narrowed.location, uri_builder
        )
        return self


class ActionRouteAssertions:
    _action_variants: tuple[type, ...] = ()

    @assertion
    def at_action(self, action_name: str) -> Self:
        narrowed = self._narrow(self._action_variants, "action name")
        validators.validate_name(
            self._context, self._subject, "action name", narrowed.action_name, action_name
        )
        return self

    @assertion
    def at_controller(self, controller_name: str) -> Self:
        narrowed = self._narrow(self._action_variants, "controller name")
        validators.validate_name(
            self._context,
            self._subject,
            "controller name",
            narrowed.controller_name,
            controller_name,
        )
        return self


class NamedRouteAssertions:
    _route_variants: tuple[type, ...] = ()

    @assertion
    def at_route(self, route_name: str) -> Self:
        narrowed = self._narrow(self._route_variants, "route name")
        validators.validate_name(
            self._context, self._subject, "route name", narrowed.route_name, route_name
        )
        return self


class RouteValueAssertions:
    _action_variants: tuple[type, ...] = ()
    _route_variants: tuple[type, ...] = ()

    @assertion
    def containing_route_value(self, key: str, value: Any = validators.MISSING) -> Self:
        """只給 key 時檢查存在，給 value 時同時比對值"""
        narrowed = self._narrow(self._action_variants + self._route_variants, "route values")
        validators.validate_route_value(
            self._context, self._subject, narrowed.route_values, key, value
        )
        return self

    @assertion
    def containing_route_values(self, route_values: Mapping[str, Any]) -> Self:
        narrowed = self._narrow(self._action_variants + self._route_variants, "route values")
        validators.validate_route_values(
            self._context, self._subject, narrowed.route_values, route_values
        )
        return self


class UrlHelperAssertions:
    _action_variants: tuple[type, ...] = ()
    _route_variants: tuple[type, ...] = ()

    @assertion
    def with_url_helper(self, url_helper: Any) -> Self:
        narrowed = self._narrow(self._action_variants + self._route_variants, "URL helper")
        validators.validate_same_instance(
            self._context, self._subject, narrowed.url_helper, url_helper, "URL helper"
        )
        return self

    @assertion
    def with_url_helper_of_type(self, url_helper_type: type) -> Self:
        narrowed = self._narrow(self._action_variants + self._route_variants, "URL helper")
        validators.validate_type(
            self._context, self._subject, narrowed.url_helper, url_helper_type, "URL helper"
        )
        return self


class OutputFormatterAssertions:
    @assertion
    def containing_output_formatter(self, formatter: Any) -> Self:
        narrowed = self._narrow(CreatedResultBase, "output formatters")
        validators.validate_contains_instance(
            self._context, self._subject, narrowed.formatters, formatter, "output formatter"
        )
        return self

    @assertion
    def containing_output_formatter_of_type(self, formatter_type: type) -> Self:
        narrowed = self._narrow(CreatedResultBase, "output formatters")
        validators.validate_contains_type(
            self._context, self._subject, narrowed.formatters, formatter_type, "output formatter"
        )
        return self


class RedirectFlagAssertions:
    @assertion
    def permanent(self, expected: bool = True) -> Self:
        narrowed = self._narrow(RedirectResultBase, "permanent flag")
        validators.validate_flag(
            self._context, self._subject, narrowed.permanent, expected, "be permanent"
        )
        return self

    @assertion
    def preserving_method(self, expected: bool = True) -> Self:
        narrowed = self._narrow(RedirectResultBase, "preserve method flag")
        validators.validate_flag(
            self._context,
            self._subject,
            narrowed.preserve_method,
            expected,
            "preserve the request method",
        )
        return self


class FileAssertions:
    _cached_stream_bytes: bytes | None = None

    @assertion
    def with_content_type(self, content_type: str) -> Self:
        narrowed = self._narrow(FileResultBase, "content type")
        validators.validate_name(
            self._context, self._subject, "content type", narrowed.content_type, content_type
        )
        return self

    @assertion
    def with_file_download_name(self, file_download_name: str) -> Self:
        narrowed = self._narrow(FileResultBase, "file download name")
        validators.validate_name(
            self._context,
            self._subject,
            "file download name",
            narrowed.file_download_name,
            file_download_name,
        )
        return self

    @assertion
    def with_last_modified(self, last_modified: datetime) -> Self:
        narrowed = self._narrow(FileResultBase, "last modified date")
        validators.validate_equal(
            self._context,
            self._subject,
            "last modified date",
            narrowed.last_modified,
            last_modified,
        )
        return self

    @assertion
    def with_entity_tag(self, entity_tag: str) -> Self:
        narrowed = self._narrow(FileResultBase, "entity tag")
        validators.validate_name(
            self._context, self._subject, "entity tag", narrowed.entity_tag, entity_tag
        )
        return self

    @assertion
    def with_file_name(self, file_name: str) -> Self:
        narrowed = self._narrow((VirtualFileResult, PhysicalFileResult), "name")
        validators.validate_name(
            self._context, self._subject, "file name", narrowed.file_name, file_name
        )
        return self

    @assertion
    def with_stream(self, stream: Any) -> Self:
        """完整讀出兩邊的 stream 後比對"""
        narrowed = self._narrow(StreamFileResult, "stream")
        validators.validate_contents(
            self._context, self._subject, self._stream_bytes(narrowed), stream, "stream"
        )
        return self

    def _stream_bytes(self, narrowed: StreamFileResult) -> bytes:
        # 不可 seek 的 stream 只能讀一次，同一個 builder 重複使用第一次讀到的內容
        if self._cached_stream_bytes is None:
            self._cached_stream_bytes = validators.read_all_bytes(narrowed.file_stream)
        return self._cached_stream_bytes

    @assertion
    def with_contents(self, contents: Any) -> Self:
        narrowed = self._narrow(ByteContentFileResult, "contents")
        validators.validate_contents(
            self._context, self._subject, narrowed.file_contents, contents, "contents"
        )
        return self

    @assertion
    def with_file_provider(self, file_provider: Any) -> Self:
        narrowed = self._narrow(VirtualFileResult, "provider")
        validators.validate_same_instance(
            self._context, self._subject, narrowed.file_provider, file_provider, "file provider"
        )
        return self

    @assertion
    def with_file_provider_of_type(self, file_provider_type: type) -> Self:
        narrowed = self._narrow(VirtualFileResult, "provider")
        validators.validate_type(
            self._context,
            self._subject,
            narrowed.file_provider,
            file_provider_type,
            "file provider",
        )
        return self


# ── Family builders ──

class CreatedResultAssertions(
    LocationAssertions,
    ActionRouteAssertions,
    NamedRouteAssertions,
    RouteValueAssertions,
    UrlHelperAssertions,
    OutputFormatterAssertions,
    BaseResultAssertions,
):
    result_kind = "created"
    family = CreatedResultBase
    _location_variants = (LocationResult,)
    _action_variants = (ActionRouteResult,)
    _route_variants = (NamedRouteResult,)


class RedirectResultAssertions(
    LocationAssertions,
    ActionRouteAssertions,
    NamedRouteAssertions,
    RouteValueAssertions,
    UrlHelperAssertions,
    RedirectFlagAssertions,
    BaseResultAssertions,
):
    result_kind = "redirect"
    family = RedirectResultBase
    _location_variants = (RedirectResult,)
    _action_variants = (RedirectToActionResult,)
    _route_variants = (RedirectToRouteResult,)


class FileResultAssertions(FileAssertions, BaseResultAssertions):
    result_kind = "file"
    family = FileResultBase
