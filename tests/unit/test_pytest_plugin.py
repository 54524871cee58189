"""
resultassert.pytest_plugin 單元測試
fixtures 綁定測試名稱，啟動時驗證設定，hook 只在結果斷言失敗時寫 log。
"""

from unittest.mock import MagicMock, patch

import pytest

from config.config import Config
from resultassert import ResultAssertionError, SoftAssert, ValidationFailure
from resultassert import pytest_plugin


def _drive_hook(item, call, report):
    """手動推進 hookwrapper generator"""
    gen = pytest_plugin.pytest_runtest_makereport(item, call)
    next(gen)
    outcome = MagicMock()
    outcome.get_result.return_value = report
    with pytest.raises(StopIteration):
        gen.send(outcome)


@pytest.mark.unit
class TestFixtures:

    def test_failure_context_uses_test_name(self, failure_context):
        assert failure_context.prefix == "When testing test_failure_context_uses_test_name expected"

    def test_expect_result_fixture(self, expect_result, location_result):
        with pytest.raises(ValidationFailure) as exc_info:
            expect_result(location_result).created().at_location("/items/6")
        assert str(exc_info.value).startswith(
            "When testing test_expect_result_fixture expected created result"
        )

    def test_soft_assert_fixture(self, soft_assert, location_result):
        sa = soft_assert()
        assert isinstance(sa, SoftAssert)
        sa.expect_result(location_result).created().at_location("/items/6")
        assert "When testing test_soft_assert_fixture expected" in str(sa.failures[0])

    def test_soft_assert_fixture_with_context(self, soft_assert, location_result):
        """指定 context 時覆蓋 failure_context"""
        with pytest.raises(ResultAssertionError, match="Custom ctx created result"):
            with soft_assert("Custom ctx") as sa:
                sa.expect_result(location_result).created().at_location("/items/6")


@pytest.mark.unit
class TestConfigure:
    """啟動時驗證設定"""

    def test_valid_config_logs_warnings(self):
        with patch.object(Config, "validate", return_value=["RESULTASSERT_CONTEXT 為空"]), \
             patch("resultassert.pytest_plugin.logger") as mock_logger:
            pytest_plugin.pytest_configure(MagicMock())
        mock_logger.warning.assert_called_once()
        assert "RESULTASSERT_CONTEXT" in mock_logger.warning.call_args[0][0]

    def test_invalid_config_is_usage_error(self):
        with patch.object(Config, "LOG_LEVEL", "VERBOSE"):
            with pytest.raises(pytest.UsageError, match="LOG_LEVEL"):
                pytest_plugin.pytest_configure(MagicMock())


@pytest.mark.unit
class TestMakeReportHook:

    def _call(self, exc):
        call = MagicMock()
        call.excinfo.value = exc
        return call

    def _report(self, when="call", failed=True):
        report = MagicMock()
        report.when = when
        report.failed = failed
        return report

    def test_logs_result_assertion_failure(self):
        item = MagicMock()
        item.name = "test_create"
        with patch("resultassert.pytest_plugin.logger") as mock_logger:
            _drive_hook(item, self._call(ValidationFailure("boom")), self._report())
        mock_logger.error.assert_called_once()
        assert "test_create" in mock_logger.error.call_args[0][0]

    def test_ignores_other_exceptions(self):
        with patch("resultassert.pytest_plugin.logger") as mock_logger:
            _drive_hook(MagicMock(), self._call(ValueError("x")), self._report())
        mock_logger.error.assert_not_called()

    def test_ignores_setup_phase(self):
        with patch("resultassert.pytest_plugin.logger") as mock_logger:
            _drive_hook(MagicMock(), self._call(ValidationFailure("x")), self._report(when="setup"))
        mock_logger.error.assert_not_called()

    def test_ignores_passed(self):
        call = MagicMock()
        call.excinfo = None
        with patch("resultassert.pytest_plugin.logger") as mock_logger:
            _drive_hook(MagicMock(), call, self._report(failed=False))
        mock_logger.error.assert_not_called()
