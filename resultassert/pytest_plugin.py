"""
pytest fixtures

在 conftest.py 加上：
    pytest_plugins = ["resultassert.pytest_plugin"]

提供：
- failure_context：以測試名稱為前綴的 FailureContext
- expect_result：已綁定 failure_context 的 expect_result
- soft_assert：Soft Assert context manager
- 啟動時驗證環境變數設定
- 斷言失敗時寫 log
"""

import functools

import pytest

from config.config import Config, ConfigValidationError
from resultassert.assertions import expect_result as _expect_result
from resultassert.assertions import soft_assert as _soft_assert
from resultassert.exceptions import ResultAssertionError
from resultassert.reporter import FailureContext
from utils.logger import logger


def pytest_configure(config):
    """pytest 啟動時驗證設定，有錯誤就中止這次執行"""
    try:
        warnings = Config.validate()
    except ConfigValidationError as error:
        raise pytest.UsageError(str(error)) from error
    for warning in warnings:
        logger.warning(f"設定警告: {warning}")


@pytest.fixture
def failure_context(request) -> FailureContext:
    """以目前測試名稱組成的失敗訊息前綴"""
    return FailureContext.for_test(request.node.name)


@pytest.fixture
def expect_result(failure_context):
    """結果斷言 fixture"""
    return functools.partial(_expect_result, context=failure_context)


@pytest.fixture
def soft_assert(failure_context):
    """Soft assert fixture，未指定 context 時使用 failure_context"""

    def _factory(context=None):
        return _soft_assert(failure_context if context is None else context)

    return _factory


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """測試因結果斷言失敗時記錄 log"""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed and call.excinfo is not None:
        if isinstance(call.excinfo.value, ResultAssertionError):
            logger.error(f"測試失敗: {item.name}: {call.excinfo.value}")
