"""
Periodic — 定期輪詢的非同步斷言

每隔 interval 秒呼叫一次 check()（回傳 FailureMessage），直到：
    eventually(): 某次回傳空訊息（成功），或超過 timeout（失敗）
    always():     每次都回傳空訊息直到 timeout（成功），或任一次失敗

check 在呼叫端同步執行，兩次 check 不會重疊。

用法：
    import fluentassert as f

    def order_is_paid() -> f.FailureMessage:
        return f.string(api.get_order(1)["status"]).equal("paid").failure

    f.periodic(timeout=10, interval=0.5, check=order_is_paid).eventually().require(reporter)
"""

from __future__ import annotations

import enum
import time
from typing import Callable

from fluentassert.config.config import Config
from fluentassert.core.assertion import Assertion
from fluentassert.core.exceptions import InvalidConfigError
from fluentassert.core.failure import FailureMessage
from fluentassert.utils.logger import logger

CheckFunc = Callable[[], FailureMessage]


class PollState(enum.Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    TIMED_OUT = "timed_out"
    FAILED = "failed"


class Periodic:
    """
    固定間隔的輪詢器

    Args:
        timeout: 總等待秒數，預設 Config.POLL_TIMEOUT
        interval: 輪詢間隔秒數，預設 Config.POLL_INTERVAL，必須大於 0
        check: 回傳 FailureMessage 的函式，也可以在 eventually()/always() 時再傳入
        clock: 單調時鐘（測試時可替換）
        sleep: 等待函式（測試時可替換）
    """

    def __init__(
        self,
        timeout: float | None = None,
        interval: float | None = None,
        check: CheckFunc | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.timeout = Config.POLL_TIMEOUT if timeout is None else timeout
        self.interval = Config.POLL_INTERVAL if interval is None else interval
        if self.interval <= 0:
            raise InvalidConfigError("interval", self.interval, "必須大於 0")
        if self.timeout < 0:
            raise InvalidConfigError("timeout", self.timeout, "不可為負數")
        if self.timeout < self.interval:
            logger.debug(f"timeout ({self.timeout}s) 小於 interval ({self.interval}s)，只會檢查一次")
        self._check = check
        self._clock = clock
        self._sleep = sleep
        self.state = PollState.RUNNING
        self.attempts = 0

    def eventually(self, check: CheckFunc | None = None) -> Assertion:
        """check 在 timeout 前任一次通過即成功"""
        check = self._resolve(check)
        last = FailureMessage()
        for failure in self._ticks(check):
            if failure.is_empty():
                self.state = PollState.SUCCEEDED
                logger.debug(f"eventually 第 {self.attempts} 次檢查通過")
                return Assertion()
            last = failure

        self.state = PollState.TIMED_OUT
        logger.warning(
            f"eventually 逾時 ({self.timeout}s)，共檢查 {self.attempts} 次",
            extra=self._log_fields("eventually"),
        )
        msg = FailureMessage("timeout", "function always failed")
        msg.merge("last failure message", last)
        return Assertion(msg)

    def always(self, check: CheckFunc | None = None) -> Assertion:
        """check 在 timeout 前每一次都必須通過"""
        check = self._resolve(check)
        for failure in self._ticks(check):
            if not failure.is_empty():
                self.state = PollState.FAILED
                logger.warning(f"always 第 {self.attempts} 次檢查失敗", extra=self._log_fields("always"))
                msg = FailureMessage("function failed", f"attempt: {self.attempts}")
                msg.merge("failure message", failure)
                return Assertion(msg)

        self.state = PollState.SUCCEEDED
        logger.debug(f"always 通過，共檢查 {self.attempts} 次")
        return Assertion()

    # ── 內部 ──

    def _log_fields(self, mode: str) -> dict:
        return {"poll_mode": mode, "attempts": self.attempts, "timeout": self.timeout}

    def _resolve(self, check: CheckFunc | None) -> CheckFunc:
        check = check or self._check
        if check is None:
            raise InvalidConfigError("check", None, "必須提供 check 函式")
        if self.state is not PollState.RUNNING:
            raise InvalidConfigError("state", self.state.value, "Periodic 只能執行一次")
        return check

    def _ticks(self, check: CheckFunc):
        """每個 tick 先等待 interval，再執行一次 check；到達 deadline 後停止"""
        deadline = self._clock() + self.timeout
        while True:
            remaining = deadline - self._clock()
            self._sleep(max(min(self.interval, remaining), 0))
            self.attempts += 1
            failure = self._run(check)
            logger.debug(
                f"第 {self.attempts} 次檢查: {'通過' if failure.is_empty() else '失敗'}"
            )
            yield failure
            if self._clock() >= deadline:
                return

    def _run(self, check: CheckFunc) -> FailureMessage:
        try:
            result = check()
        except Exception as e:
            return FailureMessage(f"check raised an exception: {type(e).__name__}: {e}")
        if isinstance(result, Assertion):
            return result.failure
        if not isinstance(result, FailureMessage):
            return FailureMessage(f"check must return a FailureMessage, got: {type(result).__name__}")
        return result


def periodic(
    timeout: float | None = None,
    interval: float | None = None,
    check: CheckFunc | None = None,
) -> Periodic:
    return Periodic(timeout, interval, check)
