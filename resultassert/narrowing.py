"""
Variant Narrower: 把未知型態的結果窄化成斷言需要的 variant

內部用 Narrowed / NotNarrowed 表示成功或失敗，不用例外做流程控制；
只有在呼叫端的 narrow() / narrow_family() 才轉成斷言失敗拋出。

用法：
    match try_narrow(result, LocationResult):
        case Narrowed(value):
            ...
        case NotNarrowed(actual_type):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from resultassert.exceptions import NarrowingFailure
from resultassert.reflection import type_name, type_of
from resultassert.reporter import FailureContext, report, report_narrowing
from utils.logger import logger

_V = TypeVar("_V")

Variant = type | tuple[type, ...]


@dataclass(frozen=True)
class Narrowed(Generic[_V]):
    value: _V

    def __repr__(self):
        return f"Narrowed({self.value!r})"


@dataclass(frozen=True)
class NotNarrowed:
    actual_type: type | None

    def __repr__(self):
        return f"NotNarrowed({type_name(self.actual_type)})"


NarrowResult = Narrowed[_V] | NotNarrowed


def try_narrow(result: Any, variant: Variant) -> NarrowResult:
    """結果是 variant（或其子類別）時回傳 Narrowed，否則 NotNarrowed"""
    if isinstance(result, variant):
        return Narrowed(result)
    return NotNarrowed(type_of(result))


def narrow(
    result: Any,
    variant: Variant,
    context: FailureContext,
    result_kind: str,
    label: str,
) -> Any:
    """窄化失敗時拋出 NarrowingFailure，訊息包含 label"""
    match try_narrow(result, variant):
        case Narrowed(value):
            return value
        case NotNarrowed(actual_type):
            logger.debug(f"{type_name(actual_type)} 沒有 {label}")
            report_narrowing(context, result_kind, label)


def narrow_family(result: Any, family: type, context: FailureContext, family_kind: str) -> Any:
    """確認結果屬於某個 family，例如 created / redirect / file"""
    match try_narrow(result, family):
        case Narrowed(value):
            logger.debug(f"結果屬於 {family_kind} family: {type_name(type(value))}")
            return value
        case NotNarrowed(actual_type):
            report(
                context,
                "action result",
                f"to be {family_kind} result",
                f"instead received {type_name(actual_type)}",
                failure=NarrowingFailure,
            )
