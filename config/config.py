"""
設定管理模組
統一管理 logging、失敗報告附件、預設 failure context 等設定。
支援透過環境變數覆蓋預設值，方便 CI/CD 整合。
支援設定值驗證，提前發現設定錯誤。
"""

import logging
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# logging 可用等級
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# 開關型設定可接受的值
_VALID_FLAGS = ("", "0", "1")


class ConfigValidationError(Exception):
    """設定驗證失敗"""

    def __init__(self, errors: list[str]):
        self.errors = errors
        msg = "設定驗證失敗:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(msg)


class Config:
    """框架全域設定"""

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_JSON = os.getenv("LOG_JSON", "").strip() == "1"
    LOG_FILE = os.getenv("LOG_FILE", "").strip()

    # 失敗時附加到 Allure 報告
    ATTACH_FAILURES = os.getenv("RESULTASSERT_ATTACH_FAILURES", "1").strip() != "0"

    # 未指定 context 時的失敗訊息前綴
    DEFAULT_CONTEXT = os.getenv("RESULTASSERT_CONTEXT", "Expected")

    @classmethod
    def console_level(cls) -> int:
        """console handler 的 logging 等級，無效值退回 INFO"""
        return getattr(logging, cls.LOG_LEVEL, logging.INFO)

    @classmethod
    def log_file(cls) -> Path | None:
        if not cls.LOG_FILE:
            return None
        path = Path(cls.LOG_FILE)
        return path if path.is_absolute() else BASE_DIR / path

    @classmethod
    def validate(cls) -> list[str]:
        """
        驗證目前設定。

        Returns:
            警告訊息列表

        Raises:
            ConfigValidationError: 有無效設定值時拋出
        """
        errors: list[str] = []
        warnings: list[str] = []

        if cls.LOG_LEVEL not in _VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL 無效: {cls.LOG_LEVEL} (可用: {', '.join(_VALID_LOG_LEVELS)})"
            )

        attach = os.getenv("RESULTASSERT_ATTACH_FAILURES", "").strip()
        if attach not in _VALID_FLAGS:
            errors.append(f"RESULTASSERT_ATTACH_FAILURES 只接受 0 或 1: {attach}")

        if not cls.DEFAULT_CONTEXT.strip():
            warnings.append("RESULTASSERT_CONTEXT 為空，失敗訊息將沒有前綴")

        if cls.LOG_JSON and not cls.LOG_FILE:
            warnings.append("LOG_JSON=1 需要搭配 LOG_FILE 才會輸出 JSON 日誌")

        if errors:
            raise ConfigValidationError(errors)

        return warnings
