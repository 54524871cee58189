from config.config import Config, ConfigValidationError

__all__ = ["Config", "ConfigValidationError"]
