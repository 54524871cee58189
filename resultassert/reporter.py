"""
Failure Reporter: 統一格式的斷言失敗訊息

所有斷言失敗都經過這裡，訊息格式固定為：
    "<context> <subject> <expectation>, but <actual>."

用法：
    from resultassert.reporter import FailureContext, report

    ctx = FailureContext.for_action("Create", "ItemsController")
    report(ctx, "created result", "to have 'GetItem' route name", "in fact found 'Other'")
    # ResultAssertionError:
    # When calling Create action in ItemsController expected created result
    # to have 'GetItem' route name, but in fact found 'Other'.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, NoReturn

from config.config import Config
from resultassert.exceptions import (
    NarrowingFailure,
    ResultAssertionError,
    ValidationFailure,
)
from utils.allure_helper import attach_json, attach_text
from utils.logger import logger


@dataclass(frozen=True)
class FailureContext:
    """失敗訊息前綴，描述被測的對象"""

    prefix: str = ""

    @classmethod
    def default(cls) -> FailureContext:
        return cls(Config.DEFAULT_CONTEXT)

    @classmethod
    def for_action(cls, action_name: str, controller_name: str) -> FailureContext:
        return cls(f"When calling {action_name} action in {controller_name} expected")

    @classmethod
    def for_test(cls, test_name: str) -> FailureContext:
        return cls(f"When testing {test_name} expected")

    @classmethod
    def coerce(cls, context: FailureContext | str | None) -> FailureContext:
        """接受 FailureContext、字串或 None（使用設定檔預設值）"""
        if context is None:
            return cls.default()
        if isinstance(context, FailureContext):
            return context
        return cls(str(context))

    def format(self, subject: str, expectation: str, actual: str) -> str:
        head = " ".join(part for part in (self.prefix, subject, expectation) if part)
        return f"{head}, but {actual}."


def format_value(value: Any) -> str:
    """字串加單引號，時間用 ISO 格式，其餘用 repr，完整保留不截斷"""
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, datetime):
        return value.isoformat()
    return repr(value)


def report(
    context: FailureContext,
    subject: str,
    expectation: str,
    actual: str,
    failure: type[ResultAssertionError] = ValidationFailure,
) -> NoReturn:
    """組出失敗訊息並拋出，永遠不會 return"""
    message = context.format(subject, expectation, actual)
    details = {"subject": subject, "expectation": expectation, "actual": actual}
    logger.debug(
        f"斷言失敗 [{failure.__name__}]: {message}",
        extra={"failure_kind": failure.__name__, **details},
    )

    if Config.ATTACH_FAILURES:
        attach_text(message, name="斷言失敗")
        attach_json(details, name="斷言失敗欄位")

    raise failure(message, context=details)


def report_narrowing(context: FailureContext, result_kind: str, label: str) -> NoReturn:
    """結果不是預期 variant 時的固定訊息"""
    report(
        context,
        f"{result_kind} result",
        f"to contain {label}",
        "such could not be found",
        failure=NarrowingFailure,
    )
