"""
Field Validators: 每個 validator 只檢查窄化後結果的一個欄位

共通規則：
- 第一個不符合的條件就交給 reporter 拋出，不再檢查後續條件
- subject 由呼叫端傳入（例如 "created result"），validator 只負責比對
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from resultassert.exceptions import MalformedExpectationError
from resultassert.reflection import are_different_types, type_name, type_of
from resultassert.reporter import FailureContext, format_value, report
from resultassert.uri import UriAssertions, is_well_formed_uri

MISSING = object()


# ── Location ──

def validate_location(
    context: FailureContext, subject: str, actual: str, expected: str
) -> None:
    """預期值先檢查是否為合法 URI，再做完全比對"""
    if not is_well_formed_uri(expected):
        report(
            context,
            f"{subject} location",
            "to be a well-formed URI",
            f"the provided {format_value(expected)} is not well-formed",
            failure=MalformedExpectationError,
        )
    if actual != expected:
        report(
            context,
            subject,
            f"to have location {format_value(expected)}",
            f"instead received {format_value(actual)}",
        )


def validate_location_predicate(
    context: FailureContext, subject: str, actual: str, predicate: Callable[[str], bool]
) -> None:
    if not predicate(actual):
        report(context, f"{subject} location", "to pass the given predicate", "it failed")


def validate_location_builder(
    context: FailureContext,
    subject: str,
    actual: str,
    uri_builder: Callable[[UriAssertions], Any],
) -> None:
    """把實際 location 交給巢狀 URI 斷言，內部失敗直接往外傳"""
    uri_builder(UriAssertions(actual, context, f"{subject} location"))


# ── 名稱 ──

def validate_name(
    context: FailureContext, subject: str, kind: str, actual: str | None, expected: str
) -> None:
    """route / action / controller 名稱完全比對"""
    if actual != expected:
        report(
            context,
            subject,
            f"to have {format_value(expected)} {kind}",
            f"in fact found {format_value(actual)}",
        )


def validate_equal(
    context: FailureContext, subject: str, description: str, actual: Any, expected: Any
) -> None:
    if actual != expected:
        report(
            context,
            subject,
            f"to have {description} equal to {format_value(expected)}",
            f"in fact found {format_value(actual)}",
        )


def validate_flag(
    context: FailureContext, subject: str, actual: bool, expected: bool, description: str
) -> None:
    if actual != expected:
        negation = "" if expected else "not "
        report(
            context,
            subject,
            f"{negation}to {description}",
            f"in fact found {format_value(actual)}",
        )


# ── Route values ──

def validate_route_value(
    context: FailureContext,
    subject: str,
    route_values: Mapping[str, Any],
    key: str,
    expected: Any = MISSING,
) -> None:
    if key not in route_values:
        report(
            context,
            subject,
            f"to have route value with {format_value(key)} key",
            "such could not be found",
        )
    if expected is MISSING:
        return
    actual = route_values[key]
    if actual != expected:
        report(
            context,
            subject,
            f"to have route value with {format_value(key)} key "
            f"equal to {format_value(expected)}",
            f"in fact found {format_value(actual)}",
        )


def validate_route_values(
    context: FailureContext,
    subject: str,
    route_values: Mapping[str, Any],
    expected: Mapping[str, Any],
) -> None:
    """逐一檢查每個預期 key，第一個不符就停止"""
    for key, value in expected.items():
        validate_route_value(context, subject, route_values, key, value)


# ── 內容 ──

def read_all_bytes(source: Any) -> bytes:
    """
    把 bytes、可迭代的整數或 binary stream 完整讀成 bytes。

    有 getvalue() 的 stream（例如 BytesIO）取整個 buffer，
    其他可 seek 的 stream 從頭讀到尾。
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if hasattr(source, "getvalue"):
        return bytes(source.getvalue())
    if hasattr(source, "read"):
        seekable = getattr(source, "seekable", None)
        if seekable is not None and seekable():
            source.seek(0)
        return bytes(source.read())
    return bytes(source)


def validate_contents(
    context: FailureContext, subject: str, actual: Any, expected: Any, description: str
) -> None:
    """
    兩邊都完整讀出後逐 byte 比對，不回報差異位置。

    預期值無法轉成 bytes（例如含有 0-255 以外的整數）時
    以 MalformedExpectationError 回報。
    """
    try:
        expected_bytes = read_all_bytes(expected)
    except (TypeError, ValueError) as error:
        report(
            context,
            subject,
            f"to have {description} equal to the provided one",
            f"the provided {description} is not a valid byte sequence ({error})",
            failure=MalformedExpectationError,
        )
    if expected_bytes != read_all_bytes(actual):
        report(
            context,
            subject,
            f"to have {description} equal to the provided one",
            "instead received different result",
        )


# ── 參考與型別 ──

def validate_same_instance(
    context: FailureContext, subject: str, actual: Any, expected: Any, description: str
) -> None:
    """比對 identity，內容相同但不同實例也算不符"""
    if actual is not expected:
        report(
            context,
            subject,
            f"to have the same {description} as the provided one",
            "in fact it was different",
        )


def validate_type(
    context: FailureContext, subject: str, actual: Any, expected_type: Any, description: str
) -> None:
    actual_type = type_of(actual)
    if are_different_types(expected_type, actual_type):
        report(
            context,
            subject,
            f"to have {description} of {type_name(expected_type)} type",
            f"in fact found {type_name(actual_type)}",
        )


def validate_contains_instance(
    context: FailureContext, subject: str, items: Iterable[Any], expected: Any, description: str
) -> None:
    if not any(item is expected for item in items):
        report(
            context,
            subject,
            f"to contain the provided {description}",
            "such could not be found",
        )


def validate_contains_type(
    context: FailureContext, subject: str, items: Iterable[Any], expected_type: Any, description: str
) -> None:
    if all(are_different_types(expected_type, type_of(item)) for item in items):
        report(
            context,
            subject,
            f"to contain {description} of {type_name(expected_type)} type",
            "none was found",
        )
