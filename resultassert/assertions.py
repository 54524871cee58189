"""
Result Assertion: 結果物件的語意化斷言入口

讓測試更好讀，失敗訊息格式一致。
支援 soft assert（收集所有失敗，最後一次報告）。

用法：
    from resultassert import expect_result, soft_assert, FailureContext

    ctx = FailureContext.for_action("Create", "ItemsController")

    # 基本斷言
    expect_result(result, ctx).created().at_location("/items/5")
    expect_result(result, ctx).created().at_route("GetItem").containing_route_value("id", 5)
    expect_result(result, ctx).file().with_contents(b"\\x01\\x02\\x03")

    # 串接
    (expect_result(result, ctx).redirect()
        .at_action("Index")
        .and_also
        .at_controller("Home")
        .permanent())

    # Soft Assert（不立即中斷）
    with soft_assert(ctx) as sa:
        sa.expect_result(result).created().at_location("/items/5")
        sa.expect_result(result).created().with_url_helper_of_type(UrlHelper)
    # 結束 with 時，如果有任何失敗，才一次拋出全部
"""

from __future__ import annotations

from typing import Any

from resultassert.builders import (
    BaseResultAssertions,
    CreatedResultAssertions,
    FileResultAssertions,
    RedirectResultAssertions,
)
from resultassert.exceptions import ResultAssertionError
from resultassert.narrowing import narrow_family
from resultassert.reporter import FailureContext
from utils.logger import logger


class ResultBuilder:
    """
    包住被測結果與失敗 context 的入口物件

    先選擇 family（created / redirect / file），再串接欄位斷言。
    """

    def __init__(self, result: Any, context: FailureContext, soft: SoftAssert | None = None):
        self._result = result
        self._context = context
        self._soft = soft

    @property
    def result(self) -> Any:
        return self._result

    @property
    def context(self) -> FailureContext:
        return self._context

    def created(self) -> CreatedResultAssertions:
        return self._family(CreatedResultAssertions)

    def redirect(self) -> RedirectResultAssertions:
        return self._family(RedirectResultAssertions)

    def file(self) -> FileResultAssertions:
        return self._family(FileResultAssertions)

    def _family(self, builder_cls: type[BaseResultAssertions]) -> Any:
        try:
            narrow_family(self._result, builder_cls.family, self._context, builder_cls.result_kind)
        except ResultAssertionError as error:
            if self._soft is None:
                raise
            self._soft.record(error)
        return builder_cls(self._result, self._context, self._soft)


def expect_result(result: Any, context: FailureContext | str | None = None) -> ResultBuilder:
    """
    建立結果斷言物件。

    Args:
        result: 被測單元回傳的結果
        context: 失敗訊息前綴，未指定時使用 Config.DEFAULT_CONTEXT
    """
    return ResultBuilder(result, FailureContext.coerce(context))


class SoftAssert:
    """
    Soft Assert: 收集所有失敗，最後一次報告。

    每一次斷言呼叫遇到失敗仍會立即中斷該次呼叫，
    只是失敗被記錄下來，串接可以繼續往下。

    用法:
        with soft_assert() as sa:
            sa.expect_result(a).created().at_location("/a")
            sa.expect_result(b).file().with_contents(b"b")
        # 結束 with 時才 raise（如果有失敗）
    """

    def __init__(self, context: FailureContext | str | None = None):
        self._context = FailureContext.coerce(context)
        self._failures: list[ResultAssertionError] = []

    def expect_result(self, result: Any, context: FailureContext | str | None = None) -> ResultBuilder:
        ctx = self._context if context is None else FailureContext.coerce(context)
        return ResultBuilder(result, ctx, soft=self)

    def record(self, error: ResultAssertionError) -> None:
        logger.debug(f"Soft Assert 記錄失敗: {error}")
        self._failures.append(error)

    @property
    def failures(self) -> list[ResultAssertionError]:
        return list(self._failures)

    @property
    def failure_count(self) -> int:
        return len(self._failures)

    def raise_if_failed(self) -> None:
        if not self._failures:
            return
        summary = f"Soft Assert: {len(self._failures)} assertion(s) failed\n"
        for i, error in enumerate(self._failures, 1):
            summary += f"  {i}. {error}\n"
        raise ResultAssertionError(
            summary,
            context={"failures": [error.context for error in self._failures]},
        )

    def __enter__(self) -> SoftAssert:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # with 區塊內已有其他例外時不覆蓋它
        if exc_type is None:
            self.raise_if_failed()


def soft_assert(context: FailureContext | str | None = None) -> SoftAssert:
    """建立 Soft Assert context manager"""
    return SoftAssert(context)
