"""
自訂 Exception 體系

斷言失敗本身不是例外，而是非空的 FailureMessage；
這裡的例外只用於「誤用函式庫」的情況（設定值無效、reporter 型別錯誤）。

Exception 樹：
    FluentAssertError
    ├── ConfigError
    │   └── InvalidConfigError
    └── ReporterError
"""


class FluentAssertError(Exception):
    """函式庫所有例外的基底"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.context = context or {}
        super().__init__(message)


# ── Config 相關 ──

class ConfigError(FluentAssertError):
    """設定相關錯誤"""


class InvalidConfigError(ConfigError):
    """設定值無效"""

    def __init__(self, key: str = "", value: object = "", reason: str = ""):
        msg = f"設定值無效: {key}={value}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, context={"key": key, "value": value})


# ── Reporter 相關 ──

class ReporterError(FluentAssertError):
    """傳入的 reporter 不具備 error()/fatal() 兩個操作"""

    def __init__(self, reporter: object = None):
        name = type(reporter).__name__
        super().__init__(
            f"reporter 必須提供 error(text) 與 fatal(text): {name}",
            context={"reporter": name},
        )
