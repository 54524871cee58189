from utils.logger import logger
from utils.allure_helper import attach_json, attach_text

__all__ = [
    "logger",
    "attach_text",
    "attach_json",
]
