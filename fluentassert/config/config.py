"""
設定管理模組
統一管理輪詢預設值、diff 輸出、值顯示長度等設定。
支援透過環境變數覆蓋預設值，方便 CI/CD 整合。
"""

import os

from fluentassert.core.exceptions import InvalidConfigError


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidConfigError(name, raw, "必須是數字") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfigError(name, raw, "必須是整數") from None


class Config:
    """函式庫全域設定"""

    # 輪詢 (秒)
    POLL_TIMEOUT = _env_float("FLUENTASSERT_POLL_TIMEOUT", 10.0)
    POLL_INTERVAL = _env_float("FLUENTASSERT_POLL_INTERVAL", 0.5)

    # 失敗訊息
    DIFF_CONTEXT = _env_int("FLUENTASSERT_DIFF_CONTEXT", 3)
    REPR_MAX = _env_int("FLUENTASSERT_REPR_MAX", 200)

    # 日誌
    LOG_DIR = os.getenv("FLUENTASSERT_LOG_DIR", "")

    @classmethod
    def validate(cls) -> list[str]:
        """
        驗證目前設定值。

        Returns:
            警告訊息 list（不影響執行）

        Raises:
            InvalidConfigError: 設定值無法使用
        """
        if cls.POLL_INTERVAL <= 0:
            raise InvalidConfigError("POLL_INTERVAL", cls.POLL_INTERVAL, "必須大於 0")
        if cls.POLL_TIMEOUT < 0:
            raise InvalidConfigError("POLL_TIMEOUT", cls.POLL_TIMEOUT, "不可為負數")
        if cls.DIFF_CONTEXT < 0:
            raise InvalidConfigError("DIFF_CONTEXT", cls.DIFF_CONTEXT, "不可為負數")
        if cls.REPR_MAX < 10:
            raise InvalidConfigError("REPR_MAX", cls.REPR_MAX, "至少 10 個字元")

        warnings = []
        if cls.POLL_TIMEOUT < cls.POLL_INTERVAL:
            warnings.append(
                f"POLL_TIMEOUT ({cls.POLL_TIMEOUT}) 小於 POLL_INTERVAL ({cls.POLL_INTERVAL})，"
                "最多只會檢查一次"
            )
        return warnings

    @classmethod
    def override(cls, **values) -> dict:
        """
        覆蓋設定值（例如 pytest 命令列參數），回傳舊值供還原。

        用法:
            old = Config.override(POLL_TIMEOUT=3)
            ...
            Config.override(**old)
        """
        old = {}
        for key, value in values.items():
            if not key.isupper() or not hasattr(cls, key):
                raise InvalidConfigError(key, value, "未知的設定項目")
            old[key] = getattr(cls, key)
            setattr(cls, key, value)
        try:
            cls.validate()
        except InvalidConfigError:
            for key, value in old.items():
                setattr(cls, key, value)
            raise
        return old
