"""
自訂 Exception 體系

所有斷言失敗都繼承 AssertionError，任何 test runner 都會當作測試失敗回報。
上層可以 catch 大類別 (如 ResultAssertionError)，
也可以精準 catch 子類別 (如 MalformedExpectationError)。

Exception 樹：
    AssertionError
    └── ResultAssertionError
        ├── NarrowingFailure            結果不是預期的 variant
        └── ValidationFailure           variant 正確但欄位不符
            └── MalformedExpectationError 測試提供的預期值本身格式錯誤
"""


class ResultAssertionError(AssertionError):
    """框架所有斷言失敗的基底，catch 這個就能攔截一切斷言錯誤"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.context = context or {}
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)

    @property
    def subject(self) -> str:
        return self.context.get("subject", "")

    @property
    def expectation(self) -> str:
        return self.context.get("expectation", "")

    @property
    def actual(self) -> str:
        return self.context.get("actual", "")


class NarrowingFailure(ResultAssertionError):
    """結果的實際型態不是斷言要求的 variant"""


class ValidationFailure(ResultAssertionError):
    """variant 符合，但某個欄位不符合預期"""


class MalformedExpectationError(ValidationFailure):
    """測試作者提供的預期值格式錯誤（例如不合法的 URI）"""
