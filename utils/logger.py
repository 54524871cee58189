"""
日誌模組
統一的 logging 設定，輸出到 console，可選擇同時輸出到檔案。

支援：
- Console 輸出（人類可讀格式）
- 檔案輸出（純文字 + 可選 JSON 結構化格式）
- 環境變數控制:
    LOG_LEVEL: console 日誌等級 (預設 INFO)
    LOG_FILE: 日誌檔路徑，未設定則不寫檔
    LOG_JSON: 設為 "1" 時另外寫一份 JSON 結構化日誌檔

斷言失敗的 log 會透過 extra 帶上 failure_kind / subject / expectation / actual，
JSON 日誌裡可以直接依欄位篩選。
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from config.config import Config

# reporter 寫入 LogRecord 的斷言欄位
FAILURE_FIELDS = ("failure_kind", "subject", "expectation", "actual")


class JsonFormatter(logging.Formatter):
    """一行一筆 JSON，斷言失敗的紀錄會多出 FAILURE_FIELDS 欄位"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for name in FAILURE_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _file_handler(path: Path, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def _create_logger() -> logging.Logger:
    _logger = logging.Logger("resultassert")
    _logger.setLevel(logging.DEBUG)

    text_format = logging.Formatter(
        "[%(asctime)s] %(levelname)-7s %(message)s",
        datefmt="%H:%M:%S",
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(Config.console_level())
    console.setFormatter(text_format)
    _logger.addHandler(console)

    log_file = Config.log_file()
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _logger.addHandler(_file_handler(log_file, text_format))
        if Config.LOG_JSON:
            _logger.addHandler(
                _file_handler(log_file.with_suffix(".json.log"), JsonFormatter())
            )

    return _logger


logger = _create_logger()
