"""
Allure 報告整合輔助
把斷言失敗的訊息與結構化欄位附加到 Allure 報告。
如未安裝 allure-pytest，所有方法會 graceful fallback，不影響測試執行。
"""

import json

from utils.logger import logger

try:
    import allure
    ALLURE_AVAILABLE = True
except ImportError:
    ALLURE_AVAILABLE = False
    logger.debug("allure-pytest 未安裝，Allure 報告功能停用")


def attach_text(text: str, name: str = "log") -> None:
    """將文字附加到 Allure 報告"""
    if ALLURE_AVAILABLE:
        allure.attach(text, name=name, attachment_type=allure.attachment_type.TEXT)


def attach_json(data: dict, name: str = "data") -> None:
    """將 dict 以 JSON 附加到 Allure 報告"""
    if ALLURE_AVAILABLE:
        allure.attach(
            json.dumps(data, ensure_ascii=False, indent=2, default=str),
            name=name,
            attachment_type=allure.attachment_type.JSON,
        )
